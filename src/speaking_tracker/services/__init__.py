"""Derivations, import and export over tracker records."""

from .event_state import filter_events, resolve_all, resolve_event_state
from .overlap import find_overlapping_events, overlap_map
from .dates import format_date, parse_display_date

__all__ = [
    "filter_events",
    "resolve_all",
    "resolve_event_state",
    "find_overlapping_events",
    "overlap_map",
    "format_date",
    "parse_display_date",
]
