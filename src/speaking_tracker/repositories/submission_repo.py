"""Submission repository for JSON store operations."""

import logging
from typing import Optional

from ..database import JsonDatabase
from ..exceptions import DuplicateSubmissionError, ReferenceNotFoundError
from ..models.submission import Submission, SubmissionCreate, SubmissionUpdate

logger = logging.getLogger("submission_repo")


def _find(submissions: list[Submission], submission_id: str) -> Optional[int]:
    for index, submission in enumerate(submissions):
        if submission.id == submission_id:
            return index
    return None


class SubmissionRepository:
    """Repository for Submission records."""

    @staticmethod
    async def create(data: SubmissionCreate) -> Submission:
        """Attach a session to an event in the submitted state."""
        async with JsonDatabase.session() as store:
            session = next((s for s in store.sessions if s.id == data.session_id), None)
            if session is None:
                raise ReferenceNotFoundError("Session", data.session_id)
            if not any(e.id == data.event_id for e in store.events):
                raise ReferenceNotFoundError("Event", data.event_id)
            if any(
                s.session_id == data.session_id and s.event_id == data.event_id
                for s in store.submissions
            ):
                raise DuplicateSubmissionError(data.session_id, data.event_id)

            submission = Submission(
                session_id=data.session_id,
                event_id=data.event_id,
                state="submitted",
                name_used=data.name_used or session.name,
                notes=data.notes,
            )
            store.submissions.append(submission)

        logger.info(f"Submitted session {data.session_id} to event {data.event_id}")
        return submission

    @staticmethod
    async def get_by_id(submission_id: str) -> Optional[Submission]:
        """Get a Submission by ID."""
        store = await JsonDatabase.read()
        index = _find(store.submissions, submission_id)
        return store.submissions[index] if index is not None else None

    @staticmethod
    async def list_all(
        event_id: Optional[str] = None, session_id: Optional[str] = None
    ) -> list[Submission]:
        """List Submissions, optionally for one event or session."""
        store = await JsonDatabase.read()
        return [
            s
            for s in store.submissions
            if (event_id is None or s.event_id == event_id)
            and (session_id is None or s.session_id == session_id)
        ]

    @staticmethod
    async def update(submission_id: str, data: SubmissionUpdate) -> Optional[Submission]:
        """Change state, name used or notes of a Submission."""
        updates = data.model_dump(exclude_unset=True, exclude_none=True)

        async with JsonDatabase.session() as store:
            index = _find(store.submissions, submission_id)
            if index is None:
                return None

            submission = store.submissions[index]
            for key, value in updates.items():
                setattr(submission, key, value)

        if "state" in updates:
            logger.info(f"Submission {submission_id} is now {updates['state']}")
        return submission

    @staticmethod
    async def update_state(submission_id: str, state: str) -> Optional[Submission]:
        """Move a Submission to another lifecycle state."""
        return await SubmissionRepository.update(submission_id, SubmissionUpdate(state=state))

    @staticmethod
    async def delete(submission_id: str) -> bool:
        """Delete a Submission."""
        async with JsonDatabase.session() as store:
            index = _find(store.submissions, submission_id)
            if index is None:
                return False
            del store.submissions[index]
        return True
