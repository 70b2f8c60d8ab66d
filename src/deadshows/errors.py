"""Exception hierarchy for deadshows.

Everything the CLI reports to the user derives from DeadShowsError, so a
command only needs a single except clause to turn a failure into a message
and a non-zero exit status.
"""


class DeadShowsError(Exception):
    """Base class for all user-reportable failures."""


class InvalidDateError(DeadShowsError, ValueError):
    """A date argument is malformed or not a real calendar date."""


class ArchiveError(DeadShowsError):
    """The archive search could not produce results."""


class ArchiveTransportError(ArchiveError):
    """The search API could not be reached."""


class ArchiveStatusError(ArchiveError):
    """The search API answered with a non-success HTTP status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Archive API request failed with status {status_code}")


class ArchiveResponseError(ArchiveError):
    """The search API answered with an error or an unexpected body."""


class BrowserLaunchError(DeadShowsError):
    """The browser could not be started for a recording."""

    def __init__(self, message: str, exit_code: int | None = None):
        self.exit_code = exit_code
        super().__init__(message)
