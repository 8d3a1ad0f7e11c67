"""Tests for the JSON store repositories."""

import asyncio
import json

import pytest

from speaking_tracker.exceptions import (
    DuplicateSubmissionError,
    InvalidDateRangeError,
    ReferenceNotFoundError,
    SessionInUseError,
)
from speaking_tracker.models import (
    EventCreate,
    EventUpdate,
    SessionCreate,
    SessionUpdate,
    SubmissionCreate,
    SubmissionUpdate,
    UISettingsUpdate,
)
from speaking_tracker.repositories import (
    EventRepository,
    SessionRepository,
    SettingsRepository,
    SubmissionRepository,
)


async def seed(name="Conf", session_name="Talk"):
    event = await EventRepository.create(EventCreate(name=name, date_start="2026-05-01"))
    session = await SessionRepository.create(SessionCreate(name=session_name))
    return event, session


@pytest.mark.asyncio
async def test_create_event_persists_camel_case(json_db, data_paths):
    """Test creating an event writes it to the data file."""
    event = await EventRepository.create(
        EventCreate(name="SQLBits", city="Wales", date_start="2026-04-22", date_end="2026-04-25")
    )

    raw = json.loads(data_paths[0].read_text())
    assert raw["version"] == 2
    assert raw["events"][0]["id"] == event.id
    assert raw["events"][0]["dateStart"] == "2026-04-22"

    fetched = await EventRepository.get_by_id(event.id)
    assert fetched.name == "SQLBits"


@pytest.mark.asyncio
async def test_get_missing_event(json_db):
    assert await EventRepository.get_by_id("nope") is None


@pytest.mark.asyncio
async def test_update_event_merges_fields(json_db):
    """Test a partial update keeps the other fields and the id."""
    event = await EventRepository.create(EventCreate(name="Conf", city="Oslo", date_start="2026-05-01"))

    updated = await EventRepository.update(
        event.id, EventUpdate(name="Renamed", travel=[{"type": "train", "reference": "ABC"}])
    )

    assert updated.id == event.id
    assert updated.name == "Renamed"
    assert updated.city == "Oslo"
    assert updated.travel[0].type == "train"
    assert (await EventRepository.get_by_id(event.id)).name == "Renamed"


@pytest.mark.asyncio
async def test_update_event_rejects_inverted_range(json_db):
    """Test an update cannot move the end before the start."""
    event = await EventRepository.create(EventCreate(name="Conf", date_start="2026-05-10"))

    with pytest.raises(InvalidDateRangeError):
        await EventRepository.update(event.id, EventUpdate(date_end="2026-05-01"))

    assert (await EventRepository.get_by_id(event.id)).date_end == ""


@pytest.mark.asyncio
async def test_update_missing_event(json_db):
    assert await EventRepository.update("nope", EventUpdate(name="X")) is None


@pytest.mark.asyncio
async def test_delete_event_cascades_submissions(json_db):
    """Test deleting an event removes its submissions only."""
    event, session = await seed()
    other = await EventRepository.create(EventCreate(name="Other"))
    await SubmissionRepository.create(SubmissionCreate(session_id=session.id, event_id=event.id))
    kept = await SubmissionRepository.create(SubmissionCreate(session_id=session.id, event_id=other.id))

    assert await EventRepository.delete(event.id) is True

    remaining = await SubmissionRepository.list_all()
    assert [s.id for s in remaining] == [kept.id]
    assert await EventRepository.delete(event.id) is False


@pytest.mark.asyncio
async def test_decline_all(json_db):
    """Test declining an event declines every submission to it."""
    event, session = await seed()
    second = await SessionRepository.create(SessionCreate(name="Second"))
    await SubmissionRepository.create(SubmissionCreate(session_id=session.id, event_id=event.id))
    await SubmissionRepository.create(SubmissionCreate(session_id=second.id, event_id=event.id))

    declined = await EventRepository.decline_all(event.id)

    assert len(declined) == 2
    assert all(s.state == "declined" for s in await SubmissionRepository.list_all(event_id=event.id))
    assert await EventRepository.decline_all("nope") is None


@pytest.mark.asyncio
async def test_create_submission_defaults(json_db):
    """Test a new submission starts as submitted under the primary name."""
    event, session = await seed(session_name="Indexing Deep Dive")

    submission = await SubmissionRepository.create(
        SubmissionCreate(session_id=session.id, event_id=event.id)
    )

    assert submission.state == "submitted"
    assert submission.name_used == "Indexing Deep Dive"


@pytest.mark.asyncio
async def test_create_submission_with_alternate_name(json_db):
    event, session = await seed()
    submission = await SubmissionRepository.create(
        SubmissionCreate(session_id=session.id, event_id=event.id, name_used="Other Title")
    )
    assert submission.name_used == "Other Title"


@pytest.mark.asyncio
async def test_create_submission_rejects_duplicates(json_db):
    """Test one submission per session and event."""
    event, session = await seed()
    await SubmissionRepository.create(SubmissionCreate(session_id=session.id, event_id=event.id))

    with pytest.raises(DuplicateSubmissionError):
        await SubmissionRepository.create(SubmissionCreate(session_id=session.id, event_id=event.id))


@pytest.mark.asyncio
async def test_create_submission_unknown_references(json_db):
    event, session = await seed()

    with pytest.raises(ReferenceNotFoundError):
        await SubmissionRepository.create(SubmissionCreate(session_id="nope", event_id=event.id))
    with pytest.raises(ReferenceNotFoundError):
        await SubmissionRepository.create(SubmissionCreate(session_id=session.id, event_id="nope"))
    assert await SubmissionRepository.list_all() == []


@pytest.mark.asyncio
async def test_update_submission_state(json_db):
    event, session = await seed()
    submission = await SubmissionRepository.create(
        SubmissionCreate(session_id=session.id, event_id=event.id)
    )

    updated = await SubmissionRepository.update_state(submission.id, "selected")
    assert updated.state == "selected"

    updated = await SubmissionRepository.update(submission.id, SubmissionUpdate(notes="Room 4"))
    assert updated.state == "selected"
    assert updated.notes == "Room 4"

    assert await SubmissionRepository.update_state("nope", "selected") is None


@pytest.mark.asyncio
async def test_delete_session_in_use(json_db):
    """Test a submitted session can only be retired, not deleted."""
    event, session = await seed()
    await SubmissionRepository.create(SubmissionCreate(session_id=session.id, event_id=event.id))

    with pytest.raises(SessionInUseError):
        await SessionRepository.delete(session.id)

    retired = await SessionRepository.set_retired(session.id, True)
    assert retired.retired is True
    assert await SessionRepository.get_by_id(session.id) is not None


@pytest.mark.asyncio
async def test_delete_unused_session(json_db):
    session = await SessionRepository.create(SessionCreate(name="Unused"))
    assert await SessionRepository.delete(session.id) is True
    assert await SessionRepository.delete(session.id) is False


@pytest.mark.asyncio
async def test_list_sessions_filters_retired(json_db):
    await SessionRepository.create(SessionCreate(name="b active"))
    await SessionRepository.create(SessionCreate(name="A retired", retired=True))

    assert [s.name for s in await SessionRepository.list_all()] == ["A retired", "b active"]
    assert [s.name for s in await SessionRepository.list_all(retired=False)] == ["b active"]
    assert [s.name for s in await SessionRepository.list_all(active=False)] == ["A retired"]


@pytest.mark.asyncio
async def test_update_session(json_db):
    session = await SessionRepository.create(SessionCreate(name="Talk"))
    updated = await SessionRepository.update(
        session.id, SessionUpdate(alternate_names=["Talk, the sequel"], level="400")
    )
    assert updated.alternate_names == ["Talk, the sequel"]
    assert updated.level == "400"


@pytest.mark.asyncio
async def test_settings_roundtrip(json_db, data_paths):
    """Test settings default when missing and persist when updated."""
    assert (await SettingsRepository.get()).show_month_view is True

    updated = await SettingsRepository.update(
        UISettingsUpdate(date_format="DD.MM.YYYY", max_events_per_month=2)
    )

    assert updated.date_format == "DD.MM.YYYY"
    assert updated.show_month_view is True
    raw = json.loads(data_paths[1].read_text())
    assert raw["dateFormat"] == "DD.MM.YYYY"
    assert raw["maxEventsPerMonth"] == 2


@pytest.mark.asyncio
async def test_loads_legacy_file(json_db, data_paths):
    """Test a file from an older release loads and is upgraded on save."""
    data_paths[0].write_text(
        json.dumps(
            {
                "events": [{"id": "e1", "name": "Legacy", "dateStart": "2019-05-01"}],
                "sessions": [],
                "submissions": [],
            }
        )
    )

    event = await EventRepository.get_by_id("e1")
    assert event.travel == []

    await EventRepository.update("e1", EventUpdate(notes="migrated"))
    raw = json.loads(data_paths[0].read_text())
    assert raw["version"] == 2
    assert raw["events"][0]["mvpSubmission"] is False


@pytest.mark.asyncio
async def test_unknown_top_level_keys_survive_writes(json_db, data_paths):
    """Test a write through the repository keeps keys it does not know."""
    data_paths[0].write_text(json.dumps({"version": 2, "futureCollection": [1]}))

    await EventRepository.create(EventCreate(name="Conf"))

    raw = json.loads(data_paths[0].read_text())
    assert raw["futureCollection"] == [1]
    assert len(raw["events"]) == 1


@pytest.mark.asyncio
async def test_concurrent_settings_updates(json_db, data_paths):
    """Test parallel settings updates each keep the other's change."""
    await asyncio.gather(
        SettingsRepository.update(UISettingsUpdate(date_format="DD.MM.YYYY")),
        SettingsRepository.update(UISettingsUpdate(max_events_per_month=3)),
        SettingsRepository.update(UISettingsUpdate(show_week_view=False)),
    )

    raw = json.loads(data_paths[1].read_text())
    assert raw["dateFormat"] == "DD.MM.YYYY"
    assert raw["maxEventsPerMonth"] == 3
    assert raw["showWeekView"] is False


@pytest.mark.asyncio
async def test_concurrent_event_creates(json_db):
    """Test parallel writes to the data file are all kept."""
    await asyncio.gather(*(EventRepository.create(EventCreate(name=f"Conf {i}")) for i in range(5)))

    events = await EventRepository.list_all()
    assert sorted(e.name for e in events) == [f"Conf {i}" for i in range(5)]
