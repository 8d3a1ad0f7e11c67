"""Import from the XML export of the old Access database."""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from ..models.document import TrackerData
from ..models.event import Event
from ..models.session import SESSION_LEVELS, Session
from ..models.submission import Submission

logger = logging.getLogger("legacy_import")

STATUS_MAP = {
    "accepted": "selected",
    "rejected": "rejected",
    "declined": "declined",
}


@dataclass
class ImportReport:
    """Counts from one import run."""

    sessions_imported: int = 0
    sessions_skipped: int = 0
    events_imported: int = 0
    events_skipped: int = 0
    submissions_imported: int = 0
    submissions_skipped: int = 0
    missing_sessions: int = 0
    missing_events: int = 0


def _rows(xml_text: str, tag: str) -> list[dict[str, str]]:
    """Rows of ``<dataroot><tag>...</tag></dataroot>`` as field dicts."""
    root = ET.fromstring(xml_text)
    return [
        {child.tag: (child.text or "").strip() for child in row}
        for row in root.findall(tag)
    ]


def map_status(status: str) -> str:
    return STATUS_MAP.get(status.strip().lower(), "submitted")


def _date_part(value: str) -> str:
    # "2016-08-27T00:00:00" -> "2016-08-27"
    return value.split("T")[0] if value else ""


def import_sessions(data: TrackerData, sessions_xml: str, report: ImportReport) -> dict[str, str]:
    """Add sessions not already present by name.

    Returns the legacy SessionID -> session id mapping.
    """
    by_name = {s.name: s.id for s in data.sessions}
    legacy_ids: dict[str, str] = {}

    for row in _rows(sessions_xml, "Sessions"):
        name = row.get("SessionName", "")
        if not name:
            logger.info("Skipping session with no name")
            report.sessions_skipped += 1
            continue

        if name in by_name:
            report.sessions_skipped += 1
        else:
            level = row.get("SessionLevel") or "100"
            session = Session(
                name=name,
                level=level if level in SESSION_LEVELS else "100",
                abstract=row.get("SessionAbstract", ""),
                summary=row.get("Summary", ""),
                goals=row.get("Goals", ""),
                elevator_pitch=row.get("Elevator_x0020_pitch", ""),
                retired=row.get("Retired") == "1",
            )
            data.sessions.append(session)
            by_name[name] = session.id
            report.sessions_imported += 1

        if row.get("SessionID"):
            legacy_ids[row["SessionID"]] = by_name[name]

    logger.info(
        f"Sessions imported: {report.sessions_imported}, skipped: {report.sessions_skipped}"
    )
    return legacy_ids


def import_events(data: TrackerData, events_xml: str, report: ImportReport) -> dict[str, str]:
    """Add events not already present by name.

    Returns the legacy EventID -> event id mapping.
    """
    by_name = {e.name: e.id for e in data.events}
    legacy_ids: dict[str, str] = {}

    for row in _rows(events_xml, "tblEvents"):
        name = row.get("EventName", "")
        legacy_id = row.get("EventID", "")
        if not name or not legacy_id:
            report.events_skipped += 1
            continue

        if name in by_name:
            legacy_ids[legacy_id] = by_name[name]
            report.events_skipped += 1
            continue

        event = Event(
            name=name,
            country=row.get("Country", ""),
            city=row.get("City", ""),
            date_start=_date_part(row.get("DateStart", "")),
            date_end=_date_part(row.get("DateEnd", "")),
            remote=row.get("IsRemote") == "1",
        )
        data.events.append(event)
        by_name[name] = event.id
        legacy_ids[legacy_id] = event.id
        report.events_imported += 1

    logger.info(f"Events imported: {report.events_imported}, skipped: {report.events_skipped}")
    return legacy_ids


def import_submissions(
    data: TrackerData,
    session_events_xml: str,
    session_ids: dict[str, str],
    event_ids: dict[str, str],
    report: ImportReport,
) -> None:
    """Add submissions, one per (session, event) pair."""
    existing = {(s.session_id, s.event_id) for s in data.submissions}
    session_names = {s.id: s.name for s in data.sessions}

    for row in _rows(session_events_xml, "tblSessionEvents"):
        legacy_event, legacy_session = row.get("EventID"), row.get("SessionID")
        if not legacy_event or not legacy_session:
            report.submissions_skipped += 1
            continue

        event_id = event_ids.get(legacy_event)
        session_id = session_ids.get(legacy_session)
        if not event_id:
            report.missing_events += 1
            continue
        if not session_id:
            report.missing_sessions += 1
            continue
        if (session_id, event_id) in existing:
            report.submissions_skipped += 1
            continue

        data.submissions.append(
            Submission(
                session_id=session_id,
                event_id=event_id,
                state=map_status(row.get("Status") or "Submitted"),
                name_used=session_names.get(session_id, ""),
            )
        )
        existing.add((session_id, event_id))
        report.submissions_imported += 1

    logger.info(
        f"Submissions imported: {report.submissions_imported}, "
        f"skipped: {report.submissions_skipped}"
    )
    logger.info(
        f"Missing sessions: {report.missing_sessions}, missing events: {report.missing_events}"
    )


def import_legacy(
    data: TrackerData, sessions_xml: str, events_xml: str, session_events_xml: str
) -> ImportReport:
    """Merge a full legacy export into ``data`` in place."""
    report = ImportReport()
    session_ids = import_sessions(data, sessions_xml, report)
    event_ids = import_events(data, events_xml, report)
    import_submissions(data, session_events_xml, session_ids, event_ids, report)
    return report
