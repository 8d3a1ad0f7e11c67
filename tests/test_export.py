"""Tests for backup, CSV and iCal exports."""

import csv
import io
from datetime import datetime, timezone

from speaking_tracker.models import Event, Session, Submission, TrackerData, UISettings
from speaking_tracker.services.export import (
    events_csv,
    events_ical,
    export_backup,
    sessions_csv,
    submissions_csv,
)

NOW = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


def sample():
    events = [
        Event(id="e1", name="SQLBits", city="Newport", country="UK", date_start="2026-04-22", date_end="2026-04-25"),
        Event(id="e2", name="Data; Night, Live", remote=True, date_start="2026-06-01"),
        Event(id="e3", name="Undated"),
    ]
    sessions = [
        Session(id="s1", name="Indexing", alternate_names=["Indexes 101", "B-Trees"]),
        Session(id="s2", name="Query Plans", retired=True),
    ]
    submissions = [
        Submission(id="x1", session_id="s1", event_id="e1", state="selected", name_used="Indexes 101"),
        Submission(id="x2", session_id="s2", event_id="e1", state="rejected"),
        Submission(id="x3", session_id="s2", event_id="e2", state="submitted"),
    ]
    return events, sessions, submissions


def rows(text):
    return list(csv.DictReader(io.StringIO(text)))


def test_backup_contains_everything():
    events, sessions, submissions = sample()
    data = TrackerData(events=events, sessions=sessions, submissions=submissions)

    backup = export_backup(data, UISettings(date_format="DD.MM.YYYY"), now=NOW)

    assert backup["version"] == 2
    assert backup["exportedAt"] == NOW.isoformat()
    assert len(backup["events"]) == 3
    assert backup["submissions"][0]["sessionId"] == "s1"
    assert backup["settings"]["dateFormat"] == "DD.MM.YYYY"


def test_events_csv():
    """Test events CSV carries the derived state."""
    events, _, submissions = sample()

    result = rows(events_csv(events, submissions))

    assert [r["name"] for r in result] == ["SQLBits", "Data; Night, Live", "Undated"]
    assert result[0]["state"] == "selected"
    assert result[1]["state"] == "pending"
    assert result[1]["remote"] == "true"
    assert result[2]["state"] == "none"


def test_sessions_csv_joins_lists():
    _, sessions, _ = sample()
    result = rows(sessions_csv(sessions))
    assert result[0]["alternateNames"] == "Indexes 101; B-Trees"
    assert result[1]["retired"] == "true"


def test_submissions_csv_names():
    events, sessions, submissions = sample()
    result = rows(submissions_csv(submissions, events, sessions))
    assert result[0]["eventName"] == "SQLBits"
    assert result[0]["sessionName"] == "Indexing"
    assert result[0]["nameUsed"] == "Indexes 101"


def test_ical_all_events():
    """Test every dated event becomes an all-day entry."""
    events, sessions, submissions = sample()

    text = events_ical(events, sessions, submissions, now=NOW)

    assert text.startswith("BEGIN:VCALENDAR\r\n")
    assert text.endswith("END:VCALENDAR\r\n")
    assert text.count("BEGIN:VEVENT") == 2
    assert "DTSTART;VALUE=DATE:20260422\r\n" in text
    assert "DTEND;VALUE=DATE:20260426\r\n" in text
    assert "DTSTAMP:20261001T120000Z\r\n" in text
    assert "UID:e1@speaking-tracker\r\n" in text
    assert "SUMMARY:Data\\; Night\\, Live\r\n" in text
    assert "LOCATION:Newport\\, UK\r\n" in text
    assert "LOCATION:Remote\r\n" in text
    assert "DESCRIPTION:Sessions: Indexes 101\r\n" in text
    assert "Undated" not in text


def test_ical_selected_only():
    """Test the confirmed feed uses selected submissions directly."""
    events, sessions, submissions = sample()

    text = events_ical(events, sessions, submissions, selected_only=True, now=NOW)

    assert text.count("BEGIN:VEVENT") == 1
    assert "SUMMARY:SQLBits" in text


def test_ical_selected_only_ignores_event_state():
    """Test an event with a selection is exported while still pending."""
    events = [Event(id="e1", name="Pending Win", date_start="2026-04-22")]
    submissions = [
        Submission(session_id="s1", event_id="e1", state="selected"),
        Submission(session_id="s2", event_id="e1", state="submitted"),
    ]
    text = events_ical(events, [], submissions, selected_only=True, now=NOW)
    assert "SUMMARY:Pending Win" in text


def test_ical_folds_long_lines():
    events = [Event(id="e1", name="Ü" * 80, date_start="2026-04-22")]

    text = events_ical(events, [], [], now=NOW)

    for line in text.split("\r\n"):
        assert len(line.encode("utf-8")) <= 75
    unfolded = text.replace("\r\n ", "")
    assert "SUMMARY:" + "Ü" * 80 + "\r\n" in unfolded
