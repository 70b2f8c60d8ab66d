"""deadshows CLI using Typer.

Commands:
- shows: Pick a recording made on the month/day of a given date
- today: Pick a recording made on today's month/day
- info: Show environment info
"""

import re
import subprocess
import sys
from datetime import date
from enum import Enum
from typing import Annotated, Optional

import click
import typer

from . import __version__
from .config import get_settings
from .errors import DeadShowsError, InvalidDateError
from .logging import configure_logging, get_logger
from .sources.archive import ArchiveClient
from .workflow import Fetch, ShowWorkflow

app = typer.Typer(
    name="deadshows",
    help="Find Grateful Dead recordings from this day in history and open one in your browser.",
    add_completion=False,
    no_args_is_help=True,
)

_DATE_ARGUMENT = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


class LogFormat(str, Enum):
    console = "console"
    json = "json"


AutoOption = Annotated[
    bool,
    typer.Option("--auto", "-a", help="Automatically open the first show without prompting"),
]


def parse_date_argument(value: str) -> date:
    """Parse a strict YYYY-MM-DD date, rejecting impossible calendar dates."""
    match = _DATE_ARGUMENT.fullmatch(value)
    if not match:
        raise InvalidDateError(f'Invalid date format. Use YYYY-MM-DD (received "{value}")')

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDateError(f'Invalid date provided: "{value}"')


def run_workflow(fetch: Fetch, auto: bool) -> None:
    """Run the selection workflow, exiting non-zero on any failure."""
    logger = get_logger(__name__)
    try:
        with ArchiveClient(settings=get_settings()) as client:
            ShowWorkflow(client).run(fetch, auto=auto)
    except DeadShowsError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except (click.exceptions.Abort, typer.Abort):
        typer.secho("Aborted.", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("workflow_failed", error=str(e))
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"deadshows {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging")] = False,
    log_format: Annotated[
        Optional[LogFormat],
        typer.Option("--log-format", help="Log format (console, json)"),
    ] = None,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit"),
    ] = False,
) -> None:
    """Find Grateful Dead recordings from this day in history."""
    settings = get_settings()
    configure_logging(
        level="DEBUG" if verbose else settings.log_level,
        format=log_format.value if log_format else settings.log_format,
    )


@app.command()
def shows(
    date_arg: Annotated[str, typer.Argument(metavar="DATE", help="Calendar date in YYYY-MM-DD format")],
    auto: AutoOption = False,
) -> None:
    """Fetch shows that happened on a specific date and open one in your browser.

    Only the month and day are used; every year the band played is searched.

    Example:
        deadshows shows 1977-05-08
    """
    try:
        target = parse_date_argument(date_arg)
    except InvalidDateError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    run_workflow(lambda source: source.fetch_by_calendar_date(target), auto)


@app.command()
def today(auto: AutoOption = False) -> None:
    """Fetch shows that happened on today's date and open one in your browser."""
    run_workflow(lambda source: source.fetch_for_today(), auto)


def _tool_version(argv: list[str]) -> str:
    try:
        completed = subprocess.run(argv, capture_output=True, text=True, check=True)
    except (OSError, subprocess.CalledProcessError):
        return "not found"
    return completed.stdout.strip() or "not found"


@app.command()
def info() -> None:
    """Show environment info."""
    versions = {
        "Python": sys.version.split()[0],
        "pip": _tool_version([sys.executable, "-m", "pip", "--version"]),
        "git": _tool_version(["git", "--version"]),
    }
    for tool, version in versions.items():
        typer.echo(f"{typer.style(tool, fg=typer.colors.CYAN)}: {typer.style(version, bold=True)}")


def main() -> None:
    """CLI entry point."""
    app()
