"""Selection workflow for deadshows.

Coordinates the full flow:
1. Fetch recordings for a calendar day
2. Group them by date and rank each group
3. Pick one, automatically or by asking the user
4. Open it in the browser
"""

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

import typer

from .browser import BrowserLauncher
from .errors import DeadShowsError
from .formatting import pluralize
from .grouping import group_by_date
from .logging import get_logger
from .models import DateGroup, Recording
from .prompts import Prompter, TerminalPrompter
from .sources import RecordingSource

logger = get_logger(__name__)

Fetch = Callable[[RecordingSource], list[Recording]]


class Outcome(str, Enum):
    OPENED = "opened"
    NO_RESULTS = "no_results"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class WorkflowResult:
    """What a workflow run did."""

    outcome: Outcome
    recordings: list[Recording] = field(default_factory=list)
    groups: list[DateGroup] = field(default_factory=list)
    selected: Recording | None = None


def stdio_is_interactive() -> bool:
    """True when both stdin and stdout are attached to a terminal."""
    return sys.stdin.isatty() and sys.stdout.isatty()


class ShowWorkflow:
    """Fetches, groups, selects and opens a recording."""

    def __init__(
        self,
        source: RecordingSource,
        launcher: BrowserLauncher | None = None,
        prompter: Prompter | None = None,
        is_interactive: Callable[[], bool] = stdio_is_interactive,
    ):
        """Initialize the workflow.

        Args:
            source: Where recordings come from
            launcher: Opens the chosen recording, defaults to the platform launcher
            prompter: Interactive chooser, defaults to terminal menus
            is_interactive: Decides whether prompting is possible at all
        """
        self.source = source
        self.launcher = launcher or BrowserLauncher()
        self.prompter = prompter or TerminalPrompter()
        self.is_interactive = is_interactive

    def run(self, fetch: Fetch, auto: bool = False) -> WorkflowResult:
        """Run one selection.

        Auto mode, and any run without a terminal on both stdin and stdout,
        opens the first recording in fetch order. That is the earliest date
        as sorted by the archive, not necessarily the best rated recording.

        Raises:
            DeadShowsError: fetching or opening the browser failed
        """
        typer.echo("Fetching shows from archive.org...")
        try:
            recordings = fetch(self.source)
        except DeadShowsError:
            typer.secho("Failed to fetch shows", fg=typer.colors.RED, err=True)
            raise

        groups = group_by_date(recordings)
        typer.secho(
            f"Found {pluralize(len(recordings), 'recording')} on {pluralize(len(groups), 'day')}",
            fg=typer.colors.GREEN,
        )
        logger.info("recordings_grouped", recordings=len(recordings), groups=len(groups))

        if not recordings:
            typer.secho("No shows found for that date.", fg=typer.colors.YELLOW)
            return WorkflowResult(outcome=Outcome.NO_RESULTS)

        if auto or not self.is_interactive():
            logger.info("auto_selection", auto=auto)
            selected = recordings[0]
        else:
            selected = self._prompt(groups)
            if selected is None:
                typer.secho("No selection made. Exiting.", fg=typer.colors.BRIGHT_BLACK)
                return WorkflowResult(outcome=Outcome.CANCELLED, recordings=recordings, groups=groups)

        self._open(selected)
        return WorkflowResult(
            outcome=Outcome.OPENED,
            recordings=recordings,
            groups=groups,
            selected=selected,
        )

    def _prompt(self, groups: list[DateGroup]) -> Recording | None:
        group = self.prompter.choose_group(groups)
        if group is None:
            return None
        return self.prompter.choose_recording(group)

    def _open(self, recording: Recording) -> None:
        typer.echo(f"Opening {recording.title} ({recording.date}) in your browser...")
        try:
            self.launcher.open(recording)
        except DeadShowsError:
            typer.secho("Failed to open the show in the browser", fg=typer.colors.RED, err=True)
            raise
        typer.echo(f"Opened {typer.style(recording.title, fg=typer.colors.GREEN)} — {recording.date}")
