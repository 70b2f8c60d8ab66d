"""Interactive numbered menus for choosing a date and a recording."""

from typing import Protocol, Sequence, TypeVar, runtime_checkable

import click
import typer

from .formatting import format_group_label, format_recording_label
from .models import DateGroup, Recording

T = TypeVar("T")

CANCEL_LABEL = "Cancel"


@runtime_checkable
class Prompter(Protocol):
    """Asks the user to pick a date group, then a recording.

    Returning None means the user cancelled.
    """

    def choose_group(self, groups: Sequence[DateGroup]) -> DateGroup | None:
        ...

    def choose_recording(self, group: DateGroup) -> Recording | None:
        ...


class TerminalPrompter:
    """Numbered menus on stdout, answered on stdin. The last entry cancels."""

    def choose_group(self, groups: Sequence[DateGroup]) -> DateGroup | None:
        return self._choose(
            "Select a date to explore recordings:",
            [(format_group_label(group), group) for group in groups],
        )

    def choose_recording(self, group: DateGroup) -> Recording | None:
        return self._choose(
            f"Select a recording from {group.date}:",
            [(format_recording_label(recording), recording) for recording in group.recordings],
        )

    def _choose(self, message: str, options: list[tuple[str, T]]) -> T | None:
        typer.echo(message)
        for number, (label, _) in enumerate(options, 1):
            typer.echo(f"  {number:>2}. {label}")
        cancel_number = len(options) + 1
        typer.echo(f"  {cancel_number:>2}. {CANCEL_LABEL}")

        choice = click.prompt("Choice", type=click.IntRange(1, cancel_number))
        if choice == cancel_number:
            return None
        return options[choice - 1][1]
