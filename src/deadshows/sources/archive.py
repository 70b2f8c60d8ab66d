"""Internet Archive data source.

Queries the advanced search API for Grateful Dead recordings made on a given
calendar day in any year the band was active.
API documentation: https://archive.org/advancedsearch.php
"""

import math
import re
from datetime import date, datetime, timezone
from typing import Any, Callable
from urllib.parse import quote

import httpx

from ..config import Settings, get_settings
from ..errors import ArchiveResponseError, ArchiveStatusError, ArchiveTransportError
from ..logging import get_logger
from ..models import UNKNOWN_DATE, Recording, classify_recording_type

logger = get_logger(__name__)

SEARCH_FIELDS = (
    "identifier",
    "title",
    "date",
    "venue",
    "coverage",
    "source",
    "avg_rating",
    "num_reviews",
    "files",
)

_ISO_PREFIX = re.compile(r"^(\d{4}-\d{2}-\d{2})")
_FLOAT_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^[+-]?\d+")

# Characters encodeURIComponent leaves alone besides the quote() defaults.
_URL_SAFE = "!'()*"

# Formats seen on older items that do not use ISO dates.
_FALLBACK_DATE_FORMATS = ("%Y/%m/%d", "%m/%d/%Y", "%B %d, %Y", "%b %d, %Y", "%d %B %Y")


def utc_today() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def normalize_archive_date(raw: Any) -> str:
    """Normalize an archive date value to YYYY-MM-DD.

    Returns UNKNOWN_DATE when the value is missing or cannot be parsed.
    """
    text = _first_text(raw)
    if not text:
        return UNKNOWN_DATE

    match = _ISO_PREFIX.match(text)
    if match:
        try:
            return date.fromisoformat(match.group(1)).isoformat()
        except ValueError:
            return UNKNOWN_DATE

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        pass

    for fmt in _FALLBACK_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date().isoformat()
        except ValueError:
            continue

    return UNKNOWN_DATE


def parse_float(value: Any) -> float | None:
    """Parse the leading number of a value, None when there is none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _FLOAT_PREFIX.match(str(value).strip())
        if not match:
            return None
        number = float(match.group(0))
    return number if math.isfinite(number) else None


def parse_count(value: Any) -> int | None:
    """Parse a non-negative review count, None when absent or invalid."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        count = int(value)
    elif isinstance(value, int):
        count = value
    else:
        match = _INT_PREFIX.match(str(value).strip())
        if not match:
            return None
        count = int(match.group(0))
    return count if count >= 0 else None


def _first_text(value: Any) -> str | None:
    """Return a stripped string, taking the first entry of multi-valued fields."""
    if isinstance(value, list):
        for item in value:
            text = _first_text(item)
            if text:
                return text
        return None
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class ArchiveClient:
    """Internet Archive advanced search client.

    The HTTP transport is injectable so tests can answer requests with
    ``httpx.MockTransport`` instead of reaching the network.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
        today: Callable[[], date] = utc_today,
    ):
        """Initialize the archive client.

        Args:
            settings: Optional settings override
            transport: Optional httpx transport used for every request
            today: Returns the date used by fetch_for_today
        """
        self.settings = settings or get_settings()
        self._today = today
        self._client = httpx.Client(
            headers={"Accept": "application/json"},
            timeout=self.settings.request_timeout,
            transport=transport,
        )

    @property
    def name(self) -> str:
        return "archive.org"

    def build_query(self, month: int, day: int) -> str:
        """Build the boolean search query for a month/day across all active years."""
        year_filters = " OR ".join(
            f"date:{year}-{month:02d}-{day:02d}"
            for year in range(self.settings.first_year, self.settings.last_year + 1)
        )
        return (
            f"collection:({self.settings.collection}) "
            f'AND creator:"{self.settings.creator}" '
            f"AND ({year_filters})"
        )

    def build_params(self, month: int, day: int) -> list[tuple[str, str | int]]:
        """Build query parameters; a list because fl[] repeats."""
        params: list[tuple[str, str | int]] = [("q", self.build_query(month, day))]
        params.extend(("fl[]", field) for field in SEARCH_FIELDS)
        params.extend(
            [
                ("sort[]", "date asc"),
                ("rows", self.settings.max_results),
                ("page", 1),
                ("output", "json"),
            ]
        )
        return params

    def build_details_url(self, identifier: str) -> str:
        return f"{self.settings.details_url}{quote(identifier, safe=_URL_SAFE)}"

    def fetch_by_calendar_date(self, day: date) -> list[Recording]:
        """Get recordings made on the month and day of ``day`` in any active year.

        The year of ``day`` is ignored. The API's date filter is not reliable
        for month/day matching, so every returned record is re-checked locally.

        Raises:
            ArchiveTransportError: the API could not be reached
            ArchiveStatusError: the API answered with a non-success status
            ArchiveResponseError: the body carried an error or no results wrapper
        """
        suffix = f"-{day.month:02d}-{day.day:02d}"
        logger.info("fetching_recordings", month=day.month, day=day.day, source=self.name)

        payload = self._search(self.build_params(day.month, day.day))

        if payload.get("error"):
            raise ArchiveResponseError(f"Archive API error: {payload['error']}")

        results = payload.get("response")
        if not isinstance(results, dict):
            raise ArchiveResponseError("Archive API response did not include any results")

        docs = results.get("docs")
        if docs is None:
            docs = []
        if not isinstance(docs, list) or not all(isinstance(doc, dict) for doc in docs):
            raise ArchiveResponseError("Archive API response contained malformed results")

        recordings: list[Recording] = []

        for doc in docs:
            if not _first_text(doc.get("identifier")):
                logger.debug("recording_without_identifier", date=doc.get("date"))
                continue

            raw_date = _first_text(doc.get("date")) or ""
            if suffix not in raw_date:
                logger.debug("recording_filtered_out", identifier=doc.get("identifier"), date=raw_date)
                continue

            recording = self._doc_to_recording(doc)
            if not recording.date.endswith(suffix):
                logger.debug(
                    "recording_filtered_out",
                    identifier=recording.identifier,
                    date=raw_date,
                    normalized=recording.date,
                )
                continue
            recordings.append(recording)

        logger.info(
            "fetch_complete",
            suffix=suffix,
            total_fetched=len(docs),
            after_filter=len(recordings),
        )
        return recordings

    def fetch_for_today(self) -> list[Recording]:
        """Get recordings made on today's month and day."""
        return self.fetch_by_calendar_date(self._today())

    def _search(self, params: list[tuple[str, str | int]]) -> dict[str, Any]:
        try:
            response = self._client.get(self.settings.search_url, params=params)
        except httpx.HTTPError as e:
            logger.info("archive_request_failed", error=str(e))
            raise ArchiveTransportError(f"Failed to fetch shows from archive.org: {e}") from e

        if not response.is_success:
            logger.info("archive_request_rejected", status_code=response.status_code)
            raise ArchiveStatusError(response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise ArchiveResponseError("Archive API returned a response that is not JSON") from e

        if not isinstance(payload, dict):
            raise ArchiveResponseError("Archive API response did not include any results")
        return payload

    def _doc_to_recording(self, doc: dict[str, Any]) -> Recording:
        """Convert a raw search document to a Recording."""
        identifier = _first_text(doc.get("identifier")) or ""
        title = _first_text(doc.get("title")) or identifier
        source = _first_text(doc.get("source"))

        return Recording(
            identifier=identifier,
            title=title,
            date=normalize_archive_date(doc.get("date")),
            venue=_first_text(doc.get("venue")),
            coverage=_first_text(doc.get("coverage")),
            source=source,
            avg_rating=parse_float(doc.get("avg_rating")),
            num_ratings=parse_count(doc.get("num_reviews")),
            recording_type=classify_recording_type(identifier, title, source),
            url=self.build_details_url(identifier),
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "ArchiveClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()
