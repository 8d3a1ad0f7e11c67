"""Scheduling conflicts between events."""

from typing import Iterable, Protocol

from ..models.event import Event, OverlappingEvent
from .dates import day_interval


class DatedRecord(Protocol):
    id: str
    date_start: str
    date_end: str


def find_overlapping_events(event: DatedRecord, candidates: Iterable[Event]) -> list[OverlappingEvent]:
    """Events whose inclusive day range intersects ``event``'s.

    ``event`` may be an unsaved draft with a placeholder id. Events
    without a valid start date never overlap anything.
    """
    interval = day_interval(event.date_start, event.date_end)
    if interval is None:
        return []
    start, end = interval

    overlapping = []
    for other in candidates:
        if other.id == event.id:
            continue
        other_interval = day_interval(other.date_start, other.date_end)
        if other_interval is None:
            continue
        other_start, other_end = other_interval
        if start <= other_end and end >= other_start:
            overlapping.append(OverlappingEvent(id=other.id, name=other.name, city=other.city))
    return overlapping


def overlap_map(events: Iterable[Event]) -> dict[str, list[OverlappingEvent]]:
    """Overlaps of every event against the rest of the collection."""
    events = list(events)
    return {event.id: find_overlapping_events(event, events) for event in events}
