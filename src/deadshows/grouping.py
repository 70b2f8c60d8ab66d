"""Grouping and ranking of recordings by calendar date."""

import math

from .models import DateGroup, Recording


def rank_key(recording: Recording) -> tuple[float, str]:
    """Sort key: highest rating first, unrated last, then title A-Z."""
    rating = recording.avg_rating
    if rating is None or not math.isfinite(rating):
        return (math.inf, recording.title)
    return (-rating, recording.title)


def rank_recordings(recordings: list[Recording]) -> list[Recording]:
    """Return recordings in rank order without touching the input list."""
    return sorted(recordings, key=rank_key)


def group_by_date(recordings: list[Recording]) -> list[DateGroup]:
    """Partition recordings by exact date string.

    Groups are ordered by date string, which is chronological for
    YYYY-MM-DD and puts the "Unknown date" sentinel after every real date.
    Every input recording lands in exactly one group.
    """
    buckets: dict[str, list[Recording]] = {}
    for recording in recordings:
        buckets.setdefault(recording.date, []).append(recording)

    return [
        DateGroup(date=day, recordings=tuple(rank_recordings(members)))
        for day, members in sorted(buckets.items())
    ]
