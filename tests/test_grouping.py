"""Tests for grouping and ranking recordings."""

from __future__ import annotations

import math

from deadshows.grouping import group_by_date, rank_recordings
from deadshows.models import UNKNOWN_DATE


def test_higher_rating_first(make_recording) -> None:
    low = make_recording("low", avg_rating=9.0)
    high = make_recording("high", avg_rating=9.5)

    assert rank_recordings([low, high]) == [high, low]


def test_unrated_sorts_after_rated(make_recording) -> None:
    unrated = make_recording("a-unrated")
    rated = make_recording("z-rated", avg_rating=0.5)
    infinite = make_recording("b-infinite", avg_rating=math.inf)

    ranked = rank_recordings([unrated, infinite, rated])

    assert ranked[0] is rated
    assert {r.identifier for r in ranked[1:]} == {"a-unrated", "b-infinite"}


def test_ties_break_by_title(make_recording) -> None:
    beta = make_recording("1", title="Beta", avg_rating=4.5)
    alpha = make_recording("2", title="Alpha", avg_rating=4.5)
    gamma = make_recording("3", title="Gamma")
    delta = make_recording("4", title="Delta")

    ranked = rank_recordings([gamma, beta, delta, alpha])

    assert [r.title for r in ranked] == ["Alpha", "Beta", "Delta", "Gamma"]
    assert rank_recordings(list(reversed(ranked))) == ranked


def test_rank_does_not_mutate_input(make_recording) -> None:
    recordings = [make_recording("a", avg_rating=1.0), make_recording("b", avg_rating=2.0)]
    original = list(recordings)

    rank_recordings(recordings)

    assert recordings == original


def test_groups_example(make_recording) -> None:
    first = make_recording("gd77-05-08.a", date="1977-05-08", avg_rating=4.8)
    second = make_recording("gd77-05-08.b", date="1977-05-08", avg_rating=4.9)
    third = make_recording("gd90-03-29", date="1990-03-29")

    groups = group_by_date([first, second, third])

    assert [g.date for g in groups] == ["1977-05-08", "1990-03-29"]
    assert groups[0].recordings == (second, first)
    assert groups[1].recordings == (third,)


def test_grouping_keeps_every_recording_once(make_recording) -> None:
    recordings = [
        make_recording("c", date="1981-05-08"),
        make_recording("a", date="1977-05-08"),
        make_recording("u", date=UNKNOWN_DATE),
        make_recording("b", date="1977-05-08"),
        make_recording("d", date="1981-05-08", avg_rating=3.0),
    ]

    groups = group_by_date(recordings)
    members = [r.identifier for g in groups for r in g.recordings]

    assert sorted(members) == sorted(r.identifier for r in recordings)
    assert [g.date for g in groups] == ["1977-05-08", "1981-05-08", UNKNOWN_DATE]
    for group in groups:
        assert all(r.date == group.date for r in group.recordings)


def test_empty_input_has_no_groups() -> None:
    assert group_by_date([]) == []
