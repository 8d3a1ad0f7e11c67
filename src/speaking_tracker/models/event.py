"""Event model: a conference or speaking engagement."""

from typing import Literal, Optional
from uuid import uuid4

from pydantic import Field, field_validator, model_validator

from .base import CamelModel, check_iso_date

TravelType = Literal["flight", "train", "bus", "car", "other"]


class TravelBooking(CamelModel):
    """A travel booking attached to an event."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    type: TravelType = "flight"
    reference: str = ""


class HotelBooking(CamelModel):
    """A hotel booking attached to an event."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str = ""
    reference: str = ""


class EventBase(CamelModel):
    """Base event attributes."""

    name: str = Field(..., min_length=1, max_length=300)
    country: str = ""
    city: str = ""
    remote: bool = False
    date_start: str = ""
    date_end: str = ""
    call_for_content_url: str = ""
    call_for_content_last_date: str = ""
    login_tool: str = ""
    travel: list[TravelBooking] = Field(default_factory=list)
    hotels: list[HotelBooking] = Field(default_factory=list)
    event_handles_travel: bool = False
    event_handles_hotel: bool = False
    mvp_submission: bool = False
    notes: str = ""


class EventCreate(EventBase):
    """Schema for creating an event."""

    @field_validator("date_start", "date_end", "call_for_content_last_date")
    @classmethod
    def check_dates(cls, value: Optional[str]) -> Optional[str]:
        return check_iso_date(value)

    @model_validator(mode="after")
    def check_date_range(self) -> "EventCreate":
        if self.date_start and self.date_end and self.date_end < self.date_start:
            raise ValueError("dateEnd must not be before dateStart")
        return self


class EventUpdate(CamelModel):
    """Schema for updating an event. Only provided fields are changed."""

    name: Optional[str] = Field(None, min_length=1, max_length=300)
    country: Optional[str] = None
    city: Optional[str] = None
    remote: Optional[bool] = None
    date_start: Optional[str] = None
    date_end: Optional[str] = None
    call_for_content_url: Optional[str] = None
    call_for_content_last_date: Optional[str] = None
    login_tool: Optional[str] = None
    travel: Optional[list[TravelBooking]] = None
    hotels: Optional[list[HotelBooking]] = None
    event_handles_travel: Optional[bool] = None
    event_handles_hotel: Optional[bool] = None
    mvp_submission: Optional[bool] = None
    notes: Optional[str] = None

    @field_validator("date_start", "date_end", "call_for_content_last_date")
    @classmethod
    def check_dates(cls, value: Optional[str]) -> Optional[str]:
        return check_iso_date(value)


class Event(EventBase):
    """Stored event record.

    Dates are kept as stored; records written by older releases may hold
    values that are not canonical dates.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))

    class Config:
        from_attributes = True
        extra = "allow"


class EventDraft(EventBase):
    """Prefilled event produced by an import, not yet saved."""

    name: str = ""


class OverlapQuery(CamelModel):
    """Date range of an event being edited, possibly not saved yet."""

    id: str = "__draft__"
    date_start: str = ""
    date_end: str = ""


class OverlappingEvent(CamelModel):
    """Identifying data of an event that overlaps another one."""

    id: str
    name: str
    city: str = ""
