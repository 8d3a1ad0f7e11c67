"""Statistics API endpoints."""

from typing import Optional

from fastapi import APIRouter, Query

from ..database import JsonDatabase
from ..repositories.settings_repo import SettingsRepository
from ..services.statistics import (
    BandwidthReport,
    SpeakingStatistics,
    check_bandwidth,
    compute_statistics,
)

router = APIRouter(prefix="/stats", tags=["Statistics"])


@router.get("", response_model=SpeakingStatistics)
async def get_statistics(
    year: Optional[int] = Query(None),
    include_retired: bool = Query(False, alias="includeRetired"),
) -> SpeakingStatistics:
    """Speaking statistics, optionally for one year."""
    data = await JsonDatabase.read()
    return compute_statistics(
        data.events, data.sessions, data.submissions, year=year, include_retired=include_retired
    )


@router.get("/bandwidth", response_model=BandwidthReport)
async def get_bandwidth() -> BandwidthReport:
    """Selected events per month and year against the configured limits."""
    data = await JsonDatabase.read()
    settings = await SettingsRepository.get()
    return check_bandwidth(data.events, data.submissions, settings)
