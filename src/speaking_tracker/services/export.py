"""Backup and calendar exports."""

import csv
import io
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

from ..models.document import TrackerData
from ..models.event import Event
from ..models.session import Session
from ..models.settings import UISettings
from ..models.submission import Submission
from .dates import day_interval
from .event_state import resolve_event_state

ICAL_PRODID = "-//speaking-tracker//Speaking Tracker//EN"

EVENT_COLUMNS = [
    "id", "name", "country", "city", "remote", "dateStart", "dateEnd",
    "callForContentUrl", "callForContentLastDate", "loginTool",
    "mvpSubmission", "state", "notes",
]
SESSION_COLUMNS = [
    "id", "name", "alternateNames", "level", "type", "retired", "abstract",
    "summary", "goals", "elevatorPitch", "materialsUrl", "targetAudience",
    "primaryTechnology", "additionalTechnologies", "equipmentNotes",
]
SUBMISSION_COLUMNS = [
    "id", "eventId", "eventName", "sessionId", "sessionName", "nameUsed", "state", "notes",
]


def export_backup(data: TrackerData, settings: UISettings, now: Optional[datetime] = None) -> dict:
    """Full JSON backup of the store and the settings."""
    now = now or datetime.now(timezone.utc)
    backup = data.model_dump(by_alias=True)
    backup["exportedAt"] = now.isoformat()
    backup["settings"] = settings.model_dump(by_alias=True)
    return backup


def _csv_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "; ".join(str(v) for v in value)
    return "" if value is None else str(value)


def _to_csv(columns: list[str], rows: Iterable[dict]) -> str:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=columns, extrasaction="ignore", lineterminator="\r\n")
    writer.writeheader()
    for row in rows:
        writer.writerow({key: _csv_value(row.get(key)) for key in columns})
    return buffer.getvalue()


def events_csv(events: Iterable[Event], submissions: Iterable[Submission]) -> str:
    submissions = list(submissions)
    rows = []
    for event in events:
        row = event.model_dump(by_alias=True)
        row["state"] = resolve_event_state(event.id, submissions)
        rows.append(row)
    return _to_csv(EVENT_COLUMNS, rows)


def sessions_csv(sessions: Iterable[Session]) -> str:
    return _to_csv(SESSION_COLUMNS, (s.model_dump(by_alias=True) for s in sessions))


def submissions_csv(
    submissions: Iterable[Submission], events: Iterable[Event], sessions: Iterable[Session]
) -> str:
    event_names = {e.id: e.name for e in events}
    session_names = {s.id: s.name for s in sessions}
    rows = []
    for submission in submissions:
        row = submission.model_dump(by_alias=True)
        row["eventName"] = event_names.get(submission.event_id, "")
        row["sessionName"] = session_names.get(submission.session_id, "")
        rows.append(row)
    return _to_csv(SUBMISSION_COLUMNS, rows)


def _escape_text(value: str) -> str:
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def _fold(line: str) -> str:
    """Fold a content line at 75 octets without splitting characters."""
    encoded = line.encode("utf-8")
    if len(encoded) <= 75:
        return line

    chunks = []
    current = ""
    limit = 75
    for char in line:
        if len((current + char).encode("utf-8")) > limit:
            chunks.append(current)
            current = ""
            # continuation lines start with a space
            limit = 74
        current += char
    chunks.append(current)
    return "\r\n ".join(chunks)


def _location(event: Event) -> str:
    parts = [p for p in (event.city, event.country) if p]
    if event.remote:
        parts.append("Remote")
    return ", ".join(parts)


def _vevent(event: Event, session_names: list[str], stamp: str) -> list[str]:
    start, end = day_interval(event.date_start, event.date_end)
    lines = [
        "BEGIN:VEVENT",
        f"UID:{event.id}@speaking-tracker",
        f"DTSTAMP:{stamp}",
        f"DTSTART;VALUE=DATE:{start.strftime('%Y%m%d')}",
        f"DTEND;VALUE=DATE:{(end + timedelta(days=1)).strftime('%Y%m%d')}",
        f"SUMMARY:{_escape_text(event.name)}",
    ]
    location = _location(event)
    if location:
        lines.append(f"LOCATION:{_escape_text(location)}")
    if session_names:
        lines.append(f"DESCRIPTION:{_escape_text('Sessions: ' + ', '.join(session_names))}")
    if event.call_for_content_url:
        lines.append(f"URL:{event.call_for_content_url}")
    lines.append("END:VEVENT")
    return lines


def events_ical(
    events: Iterable[Event],
    sessions: Iterable[Session],
    submissions: Iterable[Submission],
    selected_only: bool = False,
    now: Optional[datetime] = None,
) -> str:
    """iCalendar feed with one all-day entry per dated event.

    ``selected_only`` keeps events that have at least one selected
    submission. Events without a valid start date are skipped.
    """
    now = now or datetime.now(timezone.utc)
    stamp = now.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    session_names = {s.id: s.name for s in sessions}
    submissions = list(submissions)

    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{ICAL_PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
    ]
    for event in events:
        if day_interval(event.date_start, event.date_end) is None:
            continue
        event_subs = [s for s in submissions if s.event_id == event.id]
        selected = [s for s in event_subs if s.state == "selected"]
        if selected_only and not selected:
            continue
        names = [s.name_used or session_names.get(s.session_id, "") for s in selected]
        lines.extend(_vevent(event, [n for n in names if n], stamp))
    lines.append("END:VCALENDAR")

    return "".join(_fold(line) + "\r\n" for line in lines)
