"""Tests for data models and recording type inference."""

from __future__ import annotations

import pydantic
import pytest

from deadshows.models import DateGroup, RecordingType, classify_recording_type


def test_matrix_wins_over_soundboard() -> None:
    assert classify_recording_type("gd77-05-08.mtx.sbd.seamons") is RecordingType.MTX


def test_soundboard_keyword_without_marker() -> None:
    assert classify_recording_type("gd1977-05-08", "Live at Barton Hall", "Soundboard > Reel") is RecordingType.SBD


def test_audience_checked_last() -> None:
    assert classify_recording_type("gd72-08-27.aud.pcrp") is RecordingType.AUD
    assert classify_recording_type("gd72-08-27.sbd.aud") is RecordingType.SBD


def test_short_markers_need_word_boundaries() -> None:
    assert classify_recording_type("gd72-08-27.audio_sbdx") is None


def test_no_markers_is_none() -> None:
    assert classify_recording_type("gd1990-03-29.12345", "Grateful Dead Live", None) is None
    assert classify_recording_type("", None, "   ") is None


def test_recording_is_frozen(make_recording) -> None:
    recording = make_recording("gd77-05-08")
    with pytest.raises(pydantic.ValidationError):
        recording.title = "changed"


def test_shared_venue_only_when_all_agree(make_recording) -> None:
    same = DateGroup(
        date="1977-05-08",
        recordings=(
            make_recording("a", venue="Barton Hall"),
            make_recording("b", venue=" Barton Hall "),
            make_recording("c"),
        ),
    )
    mixed = DateGroup(
        date="1977-05-08",
        recordings=(make_recording("a", venue="Barton Hall"), make_recording("b", venue="Cornell")),
    )

    assert same.shared_venue == "Barton Hall"
    assert mixed.shared_venue is None
    assert len(same) == 3
