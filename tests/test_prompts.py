"""Tests for the terminal menus."""

from __future__ import annotations

import io

import pytest

from deadshows.grouping import group_by_date
from deadshows.prompts import TerminalPrompter


@pytest.fixture()
def groups(make_recording):
    return group_by_date(
        [
            make_recording("a", date="1977-05-08", venue="Barton Hall", avg_rating=4.1),
            make_recording("b", date="1977-05-08", venue="Barton Hall", avg_rating=4.9),
            make_recording("c", date="1981-05-08"),
        ]
    )


def _answer(monkeypatch: pytest.MonkeyPatch, *answers: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(f"{answer}\n" for answer in answers)))


def test_choose_group_and_recording(monkeypatch, capsys, groups) -> None:
    prompter = TerminalPrompter()
    _answer(monkeypatch, "1", "1")

    group = prompter.choose_group(groups)
    recording = prompter.choose_recording(group)

    assert group.date == "1977-05-08"
    assert recording.identifier == "b"
    out = capsys.readouterr().out
    assert "1. 1977-05-08 — Barton Hall (2 recordings)" in out
    assert "3. Cancel" in out


def test_last_choice_cancels(monkeypatch, groups) -> None:
    _answer(monkeypatch, "3")

    assert TerminalPrompter().choose_group(groups) is None


def test_out_of_range_choice_is_asked_again(monkeypatch, groups) -> None:
    _answer(monkeypatch, "9", "abc", "2")

    assert TerminalPrompter().choose_group(groups).date == "1981-05-08"
