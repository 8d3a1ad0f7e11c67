"""Submission model: one session proposed to one event."""

from typing import Literal, Optional
from uuid import uuid4

from pydantic import Field

from .base import CamelModel

SubmissionState = Literal["submitted", "selected", "rejected", "declined"]
EventState = Literal["selected", "rejected", "declined", "pending", "none"]

FINAL_STATES = frozenset({"selected", "rejected", "declined"})


class SubmissionCreate(CamelModel):
    """Schema for attaching a session to an event."""

    session_id: str = Field(..., min_length=1)
    event_id: str = Field(..., min_length=1)
    name_used: str = ""
    notes: str = ""


class SubmissionUpdate(CamelModel):
    """Schema for updating a submission."""

    state: Optional[SubmissionState] = None
    name_used: Optional[str] = None
    notes: Optional[str] = None


class Submission(CamelModel):
    """Stored submission record."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    session_id: str
    event_id: str
    state: SubmissionState = "submitted"
    name_used: str = ""
    notes: str = ""

    class Config:
        from_attributes = True
        extra = "allow"
