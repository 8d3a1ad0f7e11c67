"""Repository modules for JSON store operations."""

from .event_repo import EventRepository
from .session_repo import SessionRepository
from .submission_repo import SubmissionRepository
from .settings_repo import SettingsRepository

__all__ = [
    "EventRepository",
    "SessionRepository",
    "SubmissionRepository",
    "SettingsRepository",
]
