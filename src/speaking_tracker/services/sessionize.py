"""Sessionize call-for-speakers page import."""

import logging
import re

import httpx

from ..config import get_settings
from ..exceptions import SessionizeFetchError
from ..models.event import EventDraft
from .dates import parse_sessionize_date

logger = logging.getLogger("sessionize_import")

TITLE_H4_RE = re.compile(r'<div class="ibox-title">.*?<h4>([^<]+)</h4>', re.IGNORECASE | re.DOTALL)
TITLE_TAG_RE = re.compile(r"<title>([^:]+):", re.IGNORECASE)
LOCATION_RE = re.compile(r"location\s*</div>\s*<h2[^>]*>\s*(.*?)</h2>", re.IGNORECASE | re.DOTALL)
SPAN_RE = re.compile(r"<span[^>]*>([^<]+)</span>", re.IGNORECASE)
STARTS_RE = re.compile(r"event starts\s*</div>\s*<h2[^>]*>([^<]+)</h2>", re.IGNORECASE)
ENDS_RE = re.compile(r"event ends\s*</div>\s*<h2[^>]*>([^<]+)</h2>", re.IGNORECASE)
CALL_CLOSES_RE = re.compile(
    r"Call closes[^<]*</span>\s*</div>\s*<h2[^>]*>([^<]+)</h2>", re.IGNORECASE
)


def is_sessionize_url(url: str) -> bool:
    return bool(url) and "sessionize.com" in url


def _heading_date(pattern: re.Pattern, html: str) -> str:
    match = pattern.search(html)
    return parse_sessionize_date(match.group(1).strip()) if match else ""


def _parse_location(html: str) -> tuple[str, str]:
    """City and country from the last span of the location block."""
    section = LOCATION_RE.search(html)
    if not section:
        return "", ""
    spans = SPAN_RE.findall(section.group(1))
    if len(spans) < 2:
        return "", ""
    parts = [p.strip() for p in spans[-1].strip().split(",")]
    if len(parts) >= 2:
        return parts[0], parts[1]
    return parts[0], ""


def parse_sessionize_page(html: str, url: str) -> EventDraft:
    """Extract event metadata from a Sessionize page.

    Best effort: any field that cannot be found is left blank.
    """
    html = html or ""

    name = ""
    match = TITLE_H4_RE.search(html)
    if match:
        name = match.group(1).strip()
    else:
        match = TITLE_TAG_RE.search(html)
        if match:
            name = match.group(1).strip()

    city, country = _parse_location(html)

    return EventDraft(
        name=name,
        city=city,
        country=country,
        date_start=_heading_date(STARTS_RE, html),
        date_end=_heading_date(ENDS_RE, html),
        remote=False,
        call_for_content_url=url,
        call_for_content_last_date=_heading_date(CALL_CLOSES_RE, html),
        login_tool="Sessionize",
    )


async def fetch_sessionize_event(url: str, client: httpx.AsyncClient | None = None) -> EventDraft:
    """Download a Sessionize page and parse it into an event draft."""
    settings = get_settings()
    try:
        if client is None:
            async with httpx.AsyncClient(
                timeout=settings.import_timeout_seconds, follow_redirects=True
            ) as own_client:
                response = await own_client.get(url)
        else:
            response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.error(f"Error fetching Sessionize page {url}: {e}")
        raise SessionizeFetchError(f"Failed to fetch Sessionize page: {e}") from e

    draft = parse_sessionize_page(response.text, url)
    logger.info(f"Imported Sessionize event '{draft.name}' from {url}")
    return draft
