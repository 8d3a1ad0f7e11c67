"""Tests for record models and the document upgrade."""

import pytest
from pydantic import ValidationError

from speaking_tracker.models import (
    SCHEMA_VERSION,
    EventCreate,
    EventUpdate,
    SessionCreate,
    UISettings,
    upgrade_document,
)


def test_event_create_accepts_camel_case():
    """Test the wire format uses camelCase keys."""
    event = EventCreate.model_validate(
        {"name": "SQLBits", "dateStart": "2026-04-22", "dateEnd": "2026-04-25", "mvpSubmission": True}
    )
    assert event.date_start == "2026-04-22"
    assert event.mvp_submission is True
    assert event.model_dump(by_alias=True)["callForContentUrl"] == ""


def test_event_create_rejects_inverted_range():
    """Test an event cannot end before it starts."""
    with pytest.raises(ValidationError):
        EventCreate(name="Bad", date_start="2026-04-25", date_end="2026-04-22")


@pytest.mark.parametrize("value", ["22/04/2026", "2026-04-31", "tomorrow"])
def test_event_create_rejects_bad_dates(value):
    with pytest.raises(ValidationError):
        EventCreate(name="Bad", date_start=value)


def test_event_requires_name():
    with pytest.raises(ValidationError):
        EventCreate(name="")


def test_event_update_only_sets_given_fields():
    update = EventUpdate.model_validate({"city": "Oslo"})
    assert update.model_dump(exclude_unset=True) == {"city": "Oslo"}


def test_session_create_validates_vocabularies():
    """Test level, type and audience tags come from fixed sets."""
    session = SessionCreate(
        name="Intro to Indexes", level="200", type="workshop", target_audience=["dbas", "developers", "dbas"]
    )
    assert session.target_audience == ["dbas", "developers"]

    with pytest.raises(ValidationError):
        SessionCreate(name="X", level="600")
    with pytest.raises(ValidationError):
        SessionCreate(name="X", type="panel")
    with pytest.raises(ValidationError):
        SessionCreate(name="X", target_audience=["astronauts"])


def test_settings_defaults_and_limits():
    settings = UISettings()
    assert settings.date_format == "YYYY-MM-DD"
    assert settings.max_events_per_month == 0

    with pytest.raises(ValidationError):
        UISettings(max_events_per_month=40)
    with pytest.raises(ValidationError):
        UISettings(date_format="YY.MM.DD")


def test_upgrade_fills_defaults_for_old_records():
    """Test an unversioned file loads with every newer field defaulted."""
    raw = {
        "events": [
            {
                "id": "e1",
                "name": "Old Conf",
                "country": "Norway",
                "city": "Oslo",
                "dateStart": "2016-08-27",
                "dateEnd": "2016-08-27",
                "remote": False,
                "callForContentUrl": "",
                "callForContentLastDate": "",
                "loginTool": "",
            }
        ],
        "sessions": [{"id": "s1", "name": "Old Talk", "level": "300", "abstract": "..."}],
        "submissions": [{"id": "x1", "sessionId": "s1", "eventId": "e1", "state": "selected"}],
    }

    data = upgrade_document(raw)

    assert data.version == SCHEMA_VERSION
    event = data.events[0]
    assert event.travel == []
    assert event.hotels == []
    assert event.mvp_submission is False
    assert event.notes == ""
    assert data.sessions[0].type == "talk"
    assert data.sessions[0].target_audience == []
    assert data.submissions[0].name_used == ""


def test_upgrade_keeps_unknown_fields():
    """Test keys written by a newer release survive a load/save cycle."""
    raw = {"version": 2, "events": [{"id": "e1", "name": "Conf", "futureField": 7}]}

    dumped = upgrade_document(raw).model_dump(by_alias=True)

    assert dumped["events"][0]["futureField"] == 7


def test_upgrade_keeps_unknown_top_level_keys():
    """Test collections added by a newer release are not dropped."""
    raw = {"version": 1, "events": [], "futureCollection": [1]}

    dumped = upgrade_document(raw).model_dump(by_alias=True)

    assert dumped["futureCollection"] == [1]
    assert dumped["version"] == 2


def test_upgrade_empty_document():
    data = upgrade_document({})
    assert data.events == []
    assert data.sessions == []
    assert data.submissions == []
