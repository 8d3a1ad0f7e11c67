"""Speaking statistics over selected events."""

import math
from collections import Counter
from typing import Iterable, Optional

from pydantic import Field

from ..models.base import CamelModel
from ..models.event import Event
from ..models.session import SESSION_LEVELS, Session
from ..models.settings import UISettings
from ..models.submission import Submission
from .dates import parse_iso_date

COUNTRY_TO_REGION: dict[str, str] = {
    # Europe
    "United Kingdom": "Europe", "UK": "Europe", "England": "Europe", "Scotland": "Europe",
    "Wales": "Europe", "Germany": "Europe", "France": "Europe", "Spain": "Europe",
    "Italy": "Europe", "Netherlands": "Europe", "The Netherlands": "Europe",
    "Belgium": "Europe", "Sweden": "Europe", "Norway": "Europe", "Denmark": "Europe",
    "Finland": "Europe", "Poland": "Europe", "Austria": "Europe", "Switzerland": "Europe",
    "Ireland": "Europe", "Portugal": "Europe", "Czechia": "Europe", "Hungary": "Europe",
    "Romania": "Europe", "Greece": "Europe", "Croatia": "Europe", "Slovenia": "Europe",
    "Slovakia": "Europe", "Bulgaria": "Europe", "Serbia": "Europe", "Ukraine": "Europe",
    "Lithuania": "Europe", "Latvia": "Europe", "Estonia": "Europe", "Iceland": "Europe",
    "Malta": "Europe",
    # North America
    "United States": "North America", "USA": "North America", "US": "North America",
    "Canada": "North America", "Mexico": "North America", "Guatemala": "North America",
    # Remote
    "Online": "Remote",
    # South America
    "Brazil": "South America", "Argentina": "South America", "Chile": "South America",
    "Colombia": "South America", "Peru": "South America", "Venezuela": "South America",
    "Ecuador": "South America", "Uruguay": "South America",
    # Asia
    "Japan": "Asia", "China": "Asia", "South Korea": "Asia", "Korea": "Asia",
    "India": "Asia", "Singapore": "Asia", "Thailand": "Asia", "Vietnam": "Asia",
    "Malaysia": "Asia", "Indonesia": "Asia", "Philippines": "Asia", "Taiwan": "Asia",
    "Hong Kong": "Asia",
    # Middle East
    "Israel": "Middle East", "UAE": "Middle East", "United Arab Emirates": "Middle East",
    "Saudi Arabia": "Middle East", "Qatar": "Middle East", "Turkey": "Middle East",
    # Oceania
    "Australia": "Oceania", "New Zealand": "Oceania",
    # Africa
    "South Africa": "Africa", "Egypt": "Africa", "Nigeria": "Africa", "Kenya": "Africa",
    "Morocco": "Africa",
}

SEASONS = ("Spring", "Summer", "Fall", "Winter")


class EventRef(CamelModel):
    name: str
    date: str


class CountryStats(CamelModel):
    count: int = 0
    events: list[EventRef] = Field(default_factory=list)


class SessionPerformance(CamelModel):
    session_id: str
    name: str
    submitted: int
    selected: int
    rejected: int
    declined: int
    pending: int
    pending_event_names: list[str] = Field(default_factory=list)
    decided: int
    acceptance_rate: Optional[int] = None


class LevelStats(CamelModel):
    submitted: int = 0
    selected: int = 0
    rejected: int = 0
    declined: int = 0


class SpeakingStatistics(CamelModel):
    year: Optional[int] = None
    years: list[int] = Field(default_factory=list)
    events_by_year: dict[int, int] = Field(default_factory=dict)
    total_events: int = 0
    events_by_region: dict[str, int] = Field(default_factory=dict)
    events_by_season: dict[str, int] = Field(default_factory=dict)
    events_by_month: dict[int, CountryStats] = Field(default_factory=dict)
    events_by_country: dict[str, CountryStats] = Field(default_factory=dict)
    countries_visited: list[str] = Field(default_factory=list)
    unique_countries: int = 0
    unique_cities: int = 0
    remote_events: int = 0
    in_person_events: int = 0
    events_submitted: int = 0
    events_accepted: int = 0
    acceptance_rate: int = 0
    session_performance: list[SessionPerformance] = Field(default_factory=list)
    high_performing: list[SessionPerformance] = Field(default_factory=list)
    needs_rework: list[SessionPerformance] = Field(default_factory=list)
    level_stats: dict[str, LevelStats] = Field(default_factory=dict)


class PeriodLoad(CamelModel):
    period: str
    count: int
    limit: int
    over_limit: bool


class BandwidthReport(CamelModel):
    months: list[PeriodLoad] = Field(default_factory=list)
    years: list[PeriodLoad] = Field(default_factory=list)


def get_region(country: str) -> str:
    return COUNTRY_TO_REGION.get(country, "Other")


def get_season(month: int) -> str:
    """Season of a 1-based month, northern hemisphere."""
    if 3 <= month <= 5:
        return "Spring"
    if 6 <= month <= 8:
        return "Summer"
    if 9 <= month <= 11:
        return "Fall"
    return "Winter"


def _percent(part: int, whole: int) -> int:
    return math.floor(part * 100 / whole + 0.5)


def _event_year(event: Event) -> Optional[int]:
    start = parse_iso_date(event.date_start)
    return start.year if start else None


def _session_performance(
    sessions: list[Session], submissions: list[Submission], events_by_id: dict[str, Event]
) -> list[SessionPerformance]:
    stats = []
    for session in sessions:
        subs = [s for s in submissions if s.session_id == session.id]
        if not subs:
            continue
        counts = Counter(s.state for s in subs)
        decided = counts["selected"] + counts["rejected"]
        pending_names = [
            events_by_id[s.event_id].name
            for s in subs
            if s.state == "submitted" and s.event_id in events_by_id
        ]
        stats.append(
            SessionPerformance(
                session_id=session.id,
                name=session.name,
                submitted=len(subs),
                selected=counts["selected"],
                rejected=counts["rejected"],
                declined=counts["declined"],
                pending=counts["submitted"],
                pending_event_names=pending_names,
                decided=decided,
                acceptance_rate=_percent(counts["selected"], decided) if decided else None,
            )
        )

    # rated sessions first, best rate first, then most selections
    stats.sort(
        key=lambda p: (
            p.acceptance_rate is None,
            -(p.acceptance_rate or 0),
            -p.selected,
        )
    )
    return stats


def compute_statistics(
    events: Iterable[Event],
    sessions: Iterable[Session],
    submissions: Iterable[Submission],
    year: Optional[int] = None,
    include_retired: bool = False,
) -> SpeakingStatistics:
    """Statistics over events with at least one selected submission.

    The per-year chart always covers every year; everything else is
    limited to ``year`` when given.
    """
    events = list(events)
    submissions = list(submissions)
    events_by_id = {e.id: e for e in events}

    selected_event_ids = {s.event_id for s in submissions if s.state == "selected"}
    all_selected_events = [e for e in events if e.id in selected_event_ids]

    events_by_year = Counter(
        y for y in (_event_year(e) for e in all_selected_events) if y is not None
    )

    def in_year(event: Optional[Event]) -> bool:
        return event is not None and (year is None or _event_year(event) == year)

    selected_events = [e for e in all_selected_events if in_year(e)]
    year_submissions = [s for s in submissions if in_year(events_by_id.get(s.event_id))]

    stats = SpeakingStatistics(
        year=year,
        years=sorted(events_by_year, reverse=True),
        events_by_year=dict(events_by_year),
        total_events=len(selected_events),
        events_by_season={season: 0 for season in SEASONS},
        events_by_month={month: CountryStats() for month in range(1, 13)},
    )

    by_country: dict[str, CountryStats] = {}
    for event in selected_events:
        region = get_region(event.country)
        stats.events_by_region[region] = stats.events_by_region.get(region, 0) + 1

        start = parse_iso_date(event.date_start)
        if start:
            stats.events_by_season[get_season(start.month)] += 1
            month_stats = stats.events_by_month[start.month]
            month_stats.count += 1
            month_stats.events.append(EventRef(name=event.name, date=event.date_start))

        country = "Online" if event.remote else event.country
        if country:
            entry = by_country.setdefault(country, CountryStats())
            entry.count += 1
            entry.events.append(EventRef(name=event.name, date=event.date_start))

    for entry in list(by_country.values()) + list(stats.events_by_month.values()):
        entry.events.sort(key=lambda ref: ref.date, reverse=True)

    # top ten by count, Online always last
    ranked = sorted(by_country.items(), key=lambda item: (item[0] == "Online", -item[1].count))
    stats.events_by_country = dict(ranked[:10])

    in_person = [e for e in selected_events if not e.remote]
    stats.countries_visited = sorted({e.country for e in in_person if e.country})
    stats.unique_countries = len(stats.countries_visited)
    stats.unique_cities = len({e.city for e in in_person if e.city})
    stats.remote_events = len(selected_events) - len(in_person)
    stats.in_person_events = len(in_person)

    submitted_events = {s.event_id for s in year_submissions}
    accepted_events = {s.event_id for s in year_submissions if s.state == "selected"}
    stats.events_submitted = len(submitted_events)
    stats.events_accepted = len(accepted_events)
    if submitted_events:
        stats.acceptance_rate = _percent(len(accepted_events), len(submitted_events))

    visible_sessions = [s for s in sessions if include_retired or not s.retired]
    performance = _session_performance(visible_sessions, year_submissions, events_by_id)
    stats.session_performance = performance
    stats.high_performing = [
        p for p in performance if p.acceptance_rate is not None and p.acceptance_rate >= 50 and p.decided >= 2
    ]
    stats.needs_rework = [
        p for p in performance if p.acceptance_rate is not None and p.acceptance_rate < 30 and p.decided >= 3
    ]

    stats.level_stats = {level: LevelStats() for level in SESSION_LEVELS}
    for session in visible_sessions:
        if session.level not in stats.level_stats:
            continue
        level = stats.level_stats[session.level]
        for sub in year_submissions:
            if sub.session_id != session.id:
                continue
            level.submitted += 1
            if sub.state in ("selected", "rejected", "declined"):
                setattr(level, sub.state, getattr(level, sub.state) + 1)

    return stats


def check_bandwidth(
    events: Iterable[Event], submissions: Iterable[Submission], settings: UISettings
) -> BandwidthReport:
    """Selected events per month and per year against the soft limits.

    A limit of 0 means no limit and is never exceeded.
    """
    selected_event_ids = {s.event_id for s in submissions if s.state == "selected"}
    months: Counter = Counter()
    years: Counter = Counter()
    for event in events:
        if event.id not in selected_event_ids:
            continue
        start = parse_iso_date(event.date_start)
        if start is None:
            continue
        months[f"{start.year:04d}-{start.month:02d}"] += 1
        years[f"{start.year:04d}"] += 1

    def loads(counter: Counter, limit: int) -> list[PeriodLoad]:
        return [
            PeriodLoad(period=period, count=count, limit=limit, over_limit=bool(limit) and count > limit)
            for period, count in sorted(counter.items())
        ]

    return BandwidthReport(
        months=loads(months, settings.max_events_per_month),
        years=loads(years, settings.max_events_per_year),
    )
