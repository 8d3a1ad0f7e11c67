"""UI settings stored next to the data file."""

from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel

DateFormat = Literal[
    "YYYY-MM-DD",
    "MM/DD/YYYY",
    "DD/MM/YYYY",
    "DD.MM.YYYY",
    "DD-MM-YYYY",
    "YYYY/MM/DD",
]


class UISettings(CamelModel):
    """User preferences for the browser UI."""

    show_month_view: bool = True
    show_week_view: bool = True
    show_mvp_features: bool = False
    max_events_per_month: int = Field(0, ge=0, le=31)
    max_events_per_year: int = Field(0, ge=0, le=365)
    date_format: DateFormat = "YYYY-MM-DD"


class UISettingsUpdate(CamelModel):
    """Partial settings update."""

    show_month_view: Optional[bool] = None
    show_week_view: Optional[bool] = None
    show_mvp_features: Optional[bool] = None
    max_events_per_month: Optional[int] = Field(None, ge=0, le=31)
    max_events_per_year: Optional[int] = Field(None, ge=0, le=365)
    date_format: Optional[DateFormat] = None
