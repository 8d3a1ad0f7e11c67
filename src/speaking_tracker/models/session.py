"""Session model: a reusable talk proposal."""

from typing import Literal, Optional
from uuid import uuid4

from pydantic import Field, field_validator

from .base import CamelModel

SessionLevel = Literal["100", "200", "300", "400", "500"]
SessionType = Literal["talk", "workshop", "lightning", "keynote"]

SESSION_LEVELS: tuple[str, ...] = ("100", "200", "300", "400", "500")


class Audience:
    """Target audience vocabulary."""

    DEVELOPERS = "developers"
    ARCHITECTS = "architects"
    DATA_ENGINEERS = "data-engineers"
    DATA_SCIENTISTS = "data-scientists"
    DBAS = "dbas"
    DEVOPS = "devops"
    MANAGERS = "managers"
    BEGINNERS = "beginners"

    ALL = frozenset(
        {
            DEVELOPERS,
            ARCHITECTS,
            DATA_ENGINEERS,
            DATA_SCIENTISTS,
            DBAS,
            DEVOPS,
            MANAGERS,
            BEGINNERS,
        }
    )


def _check_audience(tags: Optional[list[str]]) -> Optional[list[str]]:
    if tags is None:
        return None
    unknown = set(tags) - Audience.ALL
    if unknown:
        raise ValueError(f"unknown audience tags: {', '.join(sorted(unknown))}")
    return sorted(set(tags))


class SessionBase(CamelModel):
    """Base session attributes."""

    name: str = Field(..., min_length=1, max_length=300)
    alternate_names: list[str] = Field(default_factory=list)
    level: str = "100"
    type: str = "talk"
    abstract: str = ""
    summary: str = ""
    goals: str = ""
    elevator_pitch: str = ""
    retired: bool = False
    materials_url: str = ""
    target_audience: list[str] = Field(default_factory=list)
    primary_technology: str = ""
    additional_technologies: str = ""
    equipment_notes: str = ""


class SessionCreate(SessionBase):
    """Schema for creating a session."""

    level: SessionLevel = "100"
    type: SessionType = "talk"

    @field_validator("target_audience")
    @classmethod
    def check_audience(cls, value: list[str]) -> list[str]:
        return _check_audience(value)


class SessionUpdate(CamelModel):
    """Schema for updating a session."""

    name: Optional[str] = Field(None, min_length=1, max_length=300)
    alternate_names: Optional[list[str]] = None
    level: Optional[SessionLevel] = None
    type: Optional[SessionType] = None
    abstract: Optional[str] = None
    summary: Optional[str] = None
    goals: Optional[str] = None
    elevator_pitch: Optional[str] = None
    retired: Optional[bool] = None
    materials_url: Optional[str] = None
    target_audience: Optional[list[str]] = None
    primary_technology: Optional[str] = None
    additional_technologies: Optional[str] = None
    equipment_notes: Optional[str] = None

    @field_validator("target_audience")
    @classmethod
    def check_audience(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        return _check_audience(value)


class Session(SessionBase):
    """Stored session record."""

    id: str = Field(default_factory=lambda: str(uuid4()))

    class Config:
        from_attributes = True
        extra = "allow"
