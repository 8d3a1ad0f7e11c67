"""Settings API endpoints."""

from fastapi import APIRouter

from ..models.settings import UISettings, UISettingsUpdate
from ..repositories.settings_repo import SettingsRepository
from ..services.dates import DATE_FORMAT_OPTIONS

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get("", response_model=UISettings)
async def get_settings() -> UISettings:
    """Current UI settings."""
    return await SettingsRepository.get()


@router.put("", response_model=UISettings)
async def update_settings(data: UISettingsUpdate) -> UISettings:
    """Update UI settings."""
    return await SettingsRepository.update(data)


@router.get("/date-formats")
async def list_date_formats() -> list[dict]:
    """Display date formats with examples."""
    return DATE_FORMAT_OPTIONS
