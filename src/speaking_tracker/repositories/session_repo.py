"""Session repository for JSON store operations."""

import logging
from typing import Optional

from ..database import JsonDatabase
from ..exceptions import SessionInUseError
from ..models.session import Session, SessionCreate, SessionUpdate

logger = logging.getLogger("session_repo")


def _find(sessions: list[Session], session_id: str) -> Optional[int]:
    for index, session in enumerate(sessions):
        if session.id == session_id:
            return index
    return None


class SessionRepository:
    """Repository for Session records."""

    @staticmethod
    async def create(data: SessionCreate) -> Session:
        """Create a new Session."""
        session = Session(**data.model_dump())

        async with JsonDatabase.session() as store:
            store.sessions.append(session)

        logger.info(f"Created session {session.id} ({session.name})")
        return session

    @staticmethod
    async def get_by_id(session_id: str) -> Optional[Session]:
        """Get a Session by ID."""
        store = await JsonDatabase.read()
        index = _find(store.sessions, session_id)
        return store.sessions[index] if index is not None else None

    @staticmethod
    async def list_all(active: bool = True, retired: bool = True) -> list[Session]:
        """List Sessions sorted by name, filtered by retirement."""
        store = await JsonDatabase.read()
        sessions = [s for s in store.sessions if (retired if s.retired else active)]
        return sorted(sessions, key=lambda s: s.name.lower())

    @staticmethod
    async def update(session_id: str, data: SessionUpdate) -> Optional[Session]:
        """Merge the provided fields into a Session."""
        updates = data.model_dump(exclude_unset=True, exclude_none=True)

        async with JsonDatabase.session() as store:
            index = _find(store.sessions, session_id)
            if index is None:
                return None

            store.sessions[index] = Session.model_validate(
                {**store.sessions[index].model_dump(), **updates}
            )

        return store.sessions[index]

    @staticmethod
    async def set_retired(session_id: str, retired: bool) -> Optional[Session]:
        """Retire or reactivate a Session. Its submissions are kept."""
        return await SessionRepository.update(session_id, SessionUpdate(retired=retired))

    @staticmethod
    async def delete(session_id: str) -> bool:
        """Delete a Session that no submission references."""
        async with JsonDatabase.session() as store:
            index = _find(store.sessions, session_id)
            if index is None:
                return False

            in_use = sum(1 for s in store.submissions if s.session_id == session_id)
            if in_use:
                raise SessionInUseError(session_id, in_use)

            del store.sessions[index]

        logger.info(f"Deleted session {session_id}")
        return True
