"""Versioned on-disk document holding all three collections."""

from typing import Any

from pydantic import Field

from .base import CamelModel
from .event import Event
from .session import Session
from .submission import Submission

# 1: unversioned files (no travel/hotels/mvpSubmission on older events)
# 2: versioned, session type/audience/materials, event/submission notes
SCHEMA_VERSION = 2


class TrackerData(CamelModel):
    """Everything in the data file."""

    version: int = SCHEMA_VERSION
    events: list[Event] = Field(default_factory=list)
    sessions: list[Session] = Field(default_factory=list)
    submissions: list[Submission] = Field(default_factory=list)

    class Config:
        extra = "allow"


def upgrade_document(raw: dict[str, Any]) -> TrackerData:
    """Load a raw document of any known version.

    Missing optional fields are filled with their model defaults, so a
    file written by an older release loads the same as a current one.
    Unknown top-level keys are kept. The returned document always
    carries the current version.
    """
    return TrackerData.model_validate(
        {
            **raw,
            "events": raw.get("events") or [],
            "sessions": raw.get("sessions") or [],
            "submissions": raw.get("submissions") or [],
            "version": SCHEMA_VERSION,
        }
    )
