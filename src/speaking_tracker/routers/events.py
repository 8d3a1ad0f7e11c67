"""Event API endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..exceptions import InvalidDateRangeError
from ..models.event import Event, EventCreate, EventUpdate, OverlapQuery, OverlappingEvent
from ..models.submission import EventState, Submission
from ..repositories.event_repo import EventRepository
from ..repositories.submission_repo import SubmissionRepository
from ..services.event_state import filter_events, resolve_all, resolve_event_state
from ..services.overlap import find_overlapping_events, overlap_map

router = APIRouter(prefix="/events", tags=["Events"])


@router.post("", response_model=Event, status_code=201)
async def create_event(data: EventCreate) -> Event:
    """Create a new event."""
    return await EventRepository.create(data)


@router.get("", response_model=list[Event])
async def list_events(
    state: Optional[list[EventState]] = Query(None),
    future_only: bool = Query(False, alias="futureOnly"),
) -> list[Event]:
    """List events, latest first, optionally filtered by derived state."""
    events = await EventRepository.list_all()
    submissions = await SubmissionRepository.list_all()
    return filter_events(events, submissions, states=set(state or []), future_only=future_only)


@router.get("/states", response_model=dict[str, EventState])
async def list_event_states() -> dict[str, EventState]:
    """Derived state of every event."""
    events = await EventRepository.list_all()
    submissions = await SubmissionRepository.list_all()
    return resolve_all(events, submissions)


@router.get("/overlaps", response_model=dict[str, list[OverlappingEvent]])
async def list_overlaps() -> dict[str, list[OverlappingEvent]]:
    """Scheduling conflicts of every event."""
    return overlap_map(await EventRepository.list_all())


@router.post("/overlaps", response_model=list[OverlappingEvent])
async def check_draft_overlaps(query: OverlapQuery) -> list[OverlappingEvent]:
    """Conflicts for an event being edited, saved or not."""
    return find_overlapping_events(query, await EventRepository.list_all())


@router.get("/{event_id}", response_model=Event)
async def get_event(event_id: str) -> Event:
    """Get an event by ID."""
    event = await EventRepository.get_by_id(event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.get("/{event_id}/state")
async def get_event_state(event_id: str) -> dict:
    """Derived state of one event."""
    if not await EventRepository.get_by_id(event_id):
        raise HTTPException(status_code=404, detail="Event not found")
    submissions = await SubmissionRepository.list_all(event_id=event_id)
    return {"eventId": event_id, "state": resolve_event_state(event_id, submissions)}


@router.get("/{event_id}/overlaps", response_model=list[OverlappingEvent])
async def get_event_overlaps(event_id: str) -> list[OverlappingEvent]:
    """Events whose dates collide with this one."""
    events = await EventRepository.list_all()
    event = next((e for e in events if e.id == event_id), None)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return find_overlapping_events(event, events)


@router.put("/{event_id}", response_model=Event)
async def update_event(event_id: str, data: EventUpdate) -> Event:
    """Update an event."""
    try:
        event = await EventRepository.update(event_id, data)
    except InvalidDateRangeError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.post("/{event_id}/decline", response_model=list[Submission])
async def decline_event(event_id: str) -> list[Submission]:
    """Decline every submission to an event."""
    declined = await EventRepository.decline_all(event_id)
    if declined is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return declined


@router.delete("/{event_id}", status_code=204)
async def delete_event(event_id: str) -> None:
    """Delete an event and its submissions."""
    deleted = await EventRepository.delete(event_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Event not found")
