"""Shared model configuration and field validators."""

import re
from datetime import date
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class CamelModel(BaseModel):
    """Model serialized with camelCase keys, the format of the data file."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


def check_iso_date(value: Optional[str]) -> Optional[str]:
    """Accept "" or a real calendar date in YYYY-MM-DD form."""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return ""
    if not ISO_DATE_RE.match(value):
        raise ValueError("date must be in YYYY-MM-DD format")
    date.fromisoformat(value)
    return value
