"""Import API endpoints."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..exceptions import SessionizeFetchError
from ..models.event import EventDraft
from ..services.sessionize import fetch_sessionize_event, is_sessionize_url

router = APIRouter(prefix="/import", tags=["Import"])


class SessionizeImportRequest(BaseModel):
    url: str = ""


@router.post("/sessionize", response_model=EventDraft)
async def import_from_sessionize(data: SessionizeImportRequest) -> EventDraft:
    """Prefill an event from a Sessionize call-for-speakers page.

    The draft is returned for review and is not saved.
    """
    if not is_sessionize_url(data.url):
        raise HTTPException(status_code=400, detail="Invalid Sessionize URL")
    try:
        return await fetch_sessionize_event(data.url)
    except SessionizeFetchError:
        raise HTTPException(status_code=502, detail="Failed to parse Sessionize page")
