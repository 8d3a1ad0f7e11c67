"""Date helpers shared by the derivations, exports and the UI.

Stored dates are always canonical ``YYYY-MM-DD`` strings; the display
formats only exist at the edges.
"""

import re
from datetime import date
from typing import Optional

from ..models.settings import DateFormat

ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
SESSIONIZE_DATE_RE = re.compile(r"(\d{1,2})\s+(\w{3})\s+(\d{4})")

MONTH_ABBREVIATIONS = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)

# format -> (component order, separator)
_FORMATS: dict[str, tuple[str, str]] = {
    "YYYY-MM-DD": ("YMD", "-"),
    "MM/DD/YYYY": ("MDY", "/"),
    "DD/MM/YYYY": ("DMY", "/"),
    "DD.MM.YYYY": ("DMY", "."),
    "DD-MM-YYYY": ("DMY", "-"),
    "YYYY/MM/DD": ("YMD", "/"),
}

_LENGTHS = {"Y": 4, "M": 2, "D": 2}

DATE_FORMAT_OPTIONS: list[dict[str, str]] = [
    {"value": "YYYY-MM-DD", "label": "YYYY-MM-DD", "example": "2026-01-22"},
    {"value": "MM/DD/YYYY", "label": "MM/DD/YYYY", "example": "01/22/2026"},
    {"value": "DD/MM/YYYY", "label": "DD/MM/YYYY", "example": "22/01/2026"},
    {"value": "DD.MM.YYYY", "label": "DD.MM.YYYY", "example": "22.01.2026"},
    {"value": "DD-MM-YYYY", "label": "DD-MM-YYYY", "example": "22-01-2026"},
    {"value": "YYYY/MM/DD", "label": "YYYY/MM/DD", "example": "2026/01/22"},
]


def format_date(value: str, fmt: DateFormat) -> str:
    """Render a canonical date in a display format.

    Anything that is not a canonical 4-2-2 digit date comes back unchanged.
    """
    if not value:
        return ""
    match = ISO_DATE_RE.match(value)
    if not match or fmt not in _FORMATS:
        return value
    year, month, day = match.groups()
    parts = {"Y": year, "M": month, "D": day}
    order, separator = _FORMATS[fmt]
    return separator.join(parts[p] for p in order)


def parse_display_date(value: str, fmt: DateFormat) -> str:
    """Convert a display-formatted date back to ``YYYY-MM-DD``.

    Returns "" when the value does not fit the format.
    """
    if fmt not in _FORMATS or not value:
        return ""
    order, separator = _FORMATS[fmt]
    pieces = value.strip().split(separator)
    if len(pieces) != 3:
        return ""

    parts = dict(zip(order, pieces))
    for key, expected in _LENGTHS.items():
        if len(parts[key]) != expected or not parts[key].isdigit():
            return ""

    month, day = int(parts["M"]), int(parts["D"])
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return ""
    return f"{parts['Y']}-{parts['M']}-{parts['D']}"


def parse_iso_date(value: Optional[str]) -> Optional[date]:
    """Parse a canonical date, None for empty or malformed input."""
    if not value or not ISO_DATE_RE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def day_interval(date_start: Optional[str], date_end: Optional[str]) -> Optional[tuple[date, date]]:
    """Inclusive day interval of an event.

    The end falls back to the start when it is missing or malformed, and
    an end before the start collapses to the start day. No interval
    without a valid start.
    """
    start = parse_iso_date(date_start)
    if start is None:
        return None
    end = parse_iso_date(date_end) or start
    if end < start:
        end = start
    return start, end


def parse_sessionize_date(text: str) -> str:
    """Parse "22 Apr 2026" into "2026-04-22", "" when not recognised."""
    match = SESSIONIZE_DATE_RE.search(text or "")
    if not match:
        return ""
    day, month_name, year = match.groups()
    try:
        month = MONTH_ABBREVIATIONS.index(month_name.lower()) + 1
    except ValueError:
        return ""
    return f"{year}-{month:02d}-{int(day):02d}"
