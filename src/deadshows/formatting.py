"""Human-readable labels for date groups and recordings."""

import re

from .models import DateGroup, Recording

SEPARATOR = " — "
LOCATION_SEPARATOR = " • "

_WHITESPACE = re.compile(r"\s+")


def pluralize(count: int, noun: str) -> str:
    return f"1 {noun}" if count == 1 else f"{count} {noun}s"


def format_location(coverage: str | None) -> str | None:
    """Reduce free-text coverage ("City, State, Country") to "City, Rest"."""
    if not coverage:
        return None

    normalized = _WHITESPACE.sub(" ", coverage).strip()
    segments = [segment.strip() for segment in normalized.split(",")]
    segments = [segment for segment in segments if segment]

    if not segments:
        return None
    if len(segments) == 1:
        return segments[0]

    city, *rest = segments
    return f"{city}, {', '.join(rest)}"


def group_locations(group: DateGroup) -> list[str]:
    """Distinct locations of a group, in recording order."""
    locations: list[str] = []
    for recording in group.recordings:
        location = format_location(recording.coverage)
        if location and location not in locations:
            locations.append(location)
    return locations


def format_rating(avg_rating: float | None, num_ratings: int | None) -> str | None:
    """Format an average rating, with the review count when known."""
    if avg_rating is None:
        return None
    if num_ratings is None:
        return f"Avg rating {avg_rating:.1f}"
    return f"Avg rating {avg_rating:.1f} ({pluralize(max(0, num_ratings), 'rating')})"


def format_group_label(group: DateGroup) -> str:
    """Label a date group, e.g. "1977-05-08 — Barton Hall — Ithaca, NY (3 recordings)"."""
    count = pluralize(len(group), "recording")
    details = [
        part
        for part in (group.shared_venue, LOCATION_SEPARATOR.join(group_locations(group)))
        if part
    ]
    if not details:
        return f"{group.date} ({count})"
    return f"{group.date}{SEPARATOR}{SEPARATOR.join(details)} ({count})"


def format_recording_label(recording: Recording) -> str:
    """Label a recording by venue, location, type and rating."""
    parts: list[str] = []

    venue = recording.venue.strip() if recording.venue else ""
    if venue:
        parts.append(venue)

    location = format_location(recording.coverage)
    if location:
        parts.append(location)

    parts.append(recording.recording_type.value if recording.recording_type else "Unknown source")
    parts.append(format_rating(recording.avg_rating, recording.num_ratings) or "Avg rating N/A")

    return SEPARATOR.join(parts)
