"""Event repository for JSON store operations."""

import logging
from typing import Optional

from ..database import JsonDatabase
from ..exceptions import InvalidDateRangeError
from ..models.event import Event, EventCreate, EventUpdate
from ..models.submission import Submission

logger = logging.getLogger("event_repo")


def _find(events: list[Event], event_id: str) -> Optional[int]:
    for index, event in enumerate(events):
        if event.id == event_id:
            return index
    return None


class EventRepository:
    """Repository for Event records."""

    @staticmethod
    async def create(data: EventCreate) -> Event:
        """Create a new Event."""
        event = Event(**data.model_dump())

        async with JsonDatabase.session() as store:
            store.events.append(event)

        logger.info(f"Created event {event.id} ({event.name})")
        return event

    @staticmethod
    async def get_by_id(event_id: str) -> Optional[Event]:
        """Get an Event by ID."""
        store = await JsonDatabase.read()
        index = _find(store.events, event_id)
        return store.events[index] if index is not None else None

    @staticmethod
    async def list_all() -> list[Event]:
        """List all Events in stored order."""
        store = await JsonDatabase.read()
        return store.events

    @staticmethod
    async def update(event_id: str, data: EventUpdate) -> Optional[Event]:
        """Merge the provided fields into an Event. The id never changes."""
        updates = data.model_dump(exclude_unset=True, exclude_none=True)

        async with JsonDatabase.session() as store:
            index = _find(store.events, event_id)
            if index is None:
                return None

            merged = Event.model_validate({**store.events[index].model_dump(), **updates})
            if merged.date_start and merged.date_end and merged.date_end < merged.date_start:
                raise InvalidDateRangeError(merged.date_start, merged.date_end)
            store.events[index] = merged

        return merged

    @staticmethod
    async def delete(event_id: str) -> bool:
        """Delete an Event and every submission to it."""
        async with JsonDatabase.session() as store:
            index = _find(store.events, event_id)
            if index is None:
                return False

            del store.events[index]
            before = len(store.submissions)
            store.submissions = [s for s in store.submissions if s.event_id != event_id]

        logger.info(f"Deleted event {event_id} and {before - len(store.submissions)} submission(s)")
        return True

    @staticmethod
    async def decline_all(event_id: str) -> Optional[list[Submission]]:
        """Mark every submission to an Event as declined."""
        async with JsonDatabase.session() as store:
            if _find(store.events, event_id) is None:
                return None

            declined = []
            for submission in store.submissions:
                if submission.event_id == event_id:
                    submission.state = "declined"
                    declined.append(submission)

        return declined
