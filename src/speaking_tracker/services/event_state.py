"""Aggregate status of an event derived from its submissions."""

from datetime import date
from typing import Any, Iterable, Optional, Union

from ..models.event import Event
from ..models.submission import FINAL_STATES, EventState, Submission
from .dates import parse_iso_date

SubmissionLike = Union[Submission, dict[str, Any]]


def _event_and_state(item: SubmissionLike) -> tuple[Any, Any]:
    """Event id and state of a stored model or a raw camelCase dict."""
    if isinstance(item, dict):
        return item.get("eventId", item.get("event_id")), item.get("state")
    return item.event_id, item.state


def resolve_event_state(event_id: str, submissions: Iterable[SubmissionLike]) -> EventState:
    """Compute the status of one event.

    The checks run in a fixed order: a single selection wins once every
    submission is decided, then all-rejected, then any mix of rejected and
    declined. Anything still awaiting a decision is pending.
    """
    states = [
        state
        for sub_event_id, state in map(_event_and_state, submissions)
        if sub_event_id == event_id
    ]

    if not states:
        return "none"

    all_final = all(state in FINAL_STATES for state in states)
    has_selected = any(state == "selected" for state in states)
    all_rejected = all(state == "rejected" for state in states)
    all_rejected_or_declined = all(state in ("rejected", "declined") for state in states)

    if all_final and has_selected:
        return "selected"

    if all_rejected:
        return "rejected"

    if all_rejected_or_declined:
        return "declined"

    return "pending"


def resolve_all(events: Iterable[Event], submissions: Iterable[SubmissionLike]) -> dict[str, EventState]:
    """Status of every event, keyed by event id."""
    submissions = list(submissions)
    return {event.id: resolve_event_state(event.id, submissions) for event in events}


def filter_events(
    events: Iterable[Event],
    submissions: Iterable[SubmissionLike],
    states: Optional[set[str]] = None,
    future_only: bool = False,
    today: Optional[date] = None,
) -> list[Event]:
    """Events for the list view, latest first.

    An empty ``states`` set keeps every state. With ``future_only``, past
    events are dropped except selected ones still missing their MVP
    submission.
    """
    submissions = list(submissions)
    today = today or date.today()
    result = []

    for event in events:
        state = resolve_event_state(event.id, submissions)
        show_due_to_mvp = not event.mvp_submission and state == "selected"

        if future_only and not show_due_to_mvp:
            end = parse_iso_date(event.date_end or event.date_start)
            if end is not None and end < today:
                continue

        if states and state not in states:
            continue
        result.append(event)

    return sorted(result, key=lambda e: e.date_start or "", reverse=True)
