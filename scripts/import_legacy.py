"""Import sessions, events and submissions from the old XML export."""

import argparse
import asyncio
import logging
from pathlib import Path

from speaking_tracker.database import JsonDatabase
from speaking_tracker.services.legacy_import import import_legacy


async def run_import(directory: Path) -> None:
    """Merge the XML files in ``directory`` into the data file."""
    JsonDatabase.connect()

    sessions_xml = (directory / "Sessions.xml").read_text(encoding="utf-8")
    events_xml = (directory / "tblEvents.xml").read_text(encoding="utf-8")
    session_events_xml = (directory / "tblSessionEvents.xml").read_text(encoding="utf-8")

    async with JsonDatabase.session() as data:
        report = import_legacy(data, sessions_xml, events_xml, session_events_xml)

    print(f"📥 Sessions: {report.sessions_imported} imported, {report.sessions_skipped} skipped")
    print(f"📅 Events: {report.events_imported} imported, {report.events_skipped} skipped")
    print(
        f"🔗 Submissions: {report.submissions_imported} imported, "
        f"{report.submissions_skipped} skipped"
    )
    print(f"💾 Total: {len(data.events)} events, {len(data.sessions)} sessions, "
          f"{len(data.submissions)} submissions")

    JsonDatabase.disconnect()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("directory", nargs="?", default=".", type=Path)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    asyncio.run(run_import(args.directory))
