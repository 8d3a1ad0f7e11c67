"""Export API endpoints."""

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse, Response

from ..database import JsonDatabase
from ..repositories.settings_repo import SettingsRepository
from ..services import export

router = APIRouter(prefix="/export", tags=["Export"])

CSV_TYPE = "text/csv; charset=utf-8"
ICS_TYPE = "text/calendar; charset=utf-8"


def _attachment(filename: str) -> dict:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.get("/json")
async def export_json() -> JSONResponse:
    """Backup of all data and settings."""
    data = await JsonDatabase.read()
    settings = await SettingsRepository.get()
    return JSONResponse(
        export.export_backup(data, settings),
        headers=_attachment("speaking-tracker-backup.json"),
    )


@router.get("/events.csv")
async def export_events_csv() -> Response:
    data = await JsonDatabase.read()
    body = export.events_csv(data.events, data.submissions)
    return Response(body, media_type=CSV_TYPE, headers=_attachment("events.csv"))


@router.get("/sessions.csv")
async def export_sessions_csv() -> Response:
    data = await JsonDatabase.read()
    body = export.sessions_csv(data.sessions)
    return Response(body, media_type=CSV_TYPE, headers=_attachment("sessions.csv"))


@router.get("/submissions.csv")
async def export_submissions_csv() -> Response:
    data = await JsonDatabase.read()
    body = export.submissions_csv(data.submissions, data.events, data.sessions)
    return Response(body, media_type=CSV_TYPE, headers=_attachment("submissions.csv"))


@router.get("/events.ics")
async def export_events_ical(selected: bool = Query(False)) -> Response:
    """Calendar of all events, or only those with a selected session."""
    data = await JsonDatabase.read()
    body = export.events_ical(data.events, data.sessions, data.submissions, selected_only=selected)
    filename = "confirmed-events.ics" if selected else "events.ics"
    return Response(body, media_type=ICS_TYPE, headers=_attachment(filename))


@router.get("/events/{event_id}.ics")
async def export_event_ical(event_id: str) -> Response:
    """Calendar entry for a single event."""
    data = await JsonDatabase.read()
    events = [e for e in data.events if e.id == event_id]
    if not events:
        raise HTTPException(status_code=404, detail="Event not found")
    body = export.events_ical(events, data.sessions, data.submissions)
    return Response(body, media_type=ICS_TYPE, headers=_attachment(f"{event_id}.ics"))
