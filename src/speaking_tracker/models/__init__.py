"""Pydantic models for tracker records."""

from .event import (
    Event,
    EventCreate,
    EventDraft,
    EventUpdate,
    HotelBooking,
    OverlapQuery,
    OverlappingEvent,
    TravelBooking,
)
from .session import Audience, Session, SessionCreate, SessionUpdate
from .submission import (
    FINAL_STATES,
    EventState,
    Submission,
    SubmissionCreate,
    SubmissionState,
    SubmissionUpdate,
)
from .settings import DateFormat, UISettings, UISettingsUpdate
from .document import SCHEMA_VERSION, TrackerData, upgrade_document

__all__ = [
    "Event",
    "EventCreate",
    "EventDraft",
    "EventUpdate",
    "HotelBooking",
    "OverlapQuery",
    "OverlappingEvent",
    "TravelBooking",
    "Audience",
    "Session",
    "SessionCreate",
    "SessionUpdate",
    "FINAL_STATES",
    "EventState",
    "Submission",
    "SubmissionCreate",
    "SubmissionState",
    "SubmissionUpdate",
    "DateFormat",
    "UISettings",
    "UISettingsUpdate",
    "SCHEMA_VERSION",
    "TrackerData",
    "upgrade_document",
]
