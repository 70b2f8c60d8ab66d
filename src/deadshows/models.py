"""Pydantic data models for deadshows.

Recordings come out of the archive client fully normalized and are never
mutated afterwards; grouping and ranking build new values.
"""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_DATE = "Unknown date"


class RecordingType(str, Enum):
    """Provenance of a recording."""

    SBD = "SBD"  # soundboard
    AUD = "AUD"  # audience
    MTX = "MTX"  # matrix of soundboard and audience sources


# Checked in order; the first rule that matches any text segment wins.
RECORDING_TYPE_RULES: tuple[tuple[RecordingType, re.Pattern[str], str], ...] = (
    (RecordingType.MTX, re.compile(r"\bmtx\b"), "matrix"),
    (RecordingType.SBD, re.compile(r"\bsbd\b"), "soundboard"),
    (RecordingType.AUD, re.compile(r"\baud\b"), "audience"),
)


def classify_recording_type(*segments: str | None) -> RecordingType | None:
    """Infer the recording type from free-text fields.

    Each segment (identifier, title, source...) is lowercased and checked for
    the short marker as a whole word, or the long marker as a substring.
    """
    texts = [segment.lower() for segment in segments if segment and segment.strip()]
    for recording_type, marker, keyword in RECORDING_TYPE_RULES:
        if any(marker.search(text) or keyword in text for text in texts):
            return recording_type
    return None


class Recording(BaseModel):
    """A single archived performance returned by the search API."""

    model_config = ConfigDict(frozen=True)

    identifier: str = Field(description="Archive item identifier")
    title: str = Field(description="Item title, falls back to the identifier")
    date: str = Field(description="YYYY-MM-DD, or 'Unknown date'")
    venue: str | None = Field(default=None, description="Venue name as documented")
    coverage: str | None = Field(default=None, description="Free text 'City, State, Country'")
    source: str | None = Field(default=None, description="Free text describing the recording lineage")
    avg_rating: float | None = Field(default=None, description="Average review rating")
    num_ratings: int | None = Field(default=None, ge=0, description="Number of reviews")
    recording_type: RecordingType | None = Field(default=None, description="Inferred SBD/AUD/MTX tag")
    url: str = Field(description="Archive details page")


class DateGroup(BaseModel):
    """Recordings that share one calendar date, best ranked first."""

    model_config = ConfigDict(frozen=True)

    date: str
    recordings: tuple[Recording, ...]

    def __len__(self) -> int:
        return len(self.recordings)

    @property
    def shared_venue(self) -> str | None:
        """The venue, only when every recording that names one agrees on it."""
        venues = {r.venue.strip() for r in self.recordings if r.venue and r.venue.strip()}
        if len(venues) == 1:
            return venues.pop()
        return None

