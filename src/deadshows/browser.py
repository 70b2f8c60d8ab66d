"""Opening recordings in the user's default browser.

Each platform has its own launcher command. The Windows launcher goes
through ``cmd /c start``, whose exit code says nothing about whether the
browser opened, so it is fire-and-forget: spawning without an error counts
as success.
"""

import subprocess
import sys
from dataclasses import dataclass
from typing import Any, Callable

from .errors import BrowserLaunchError
from .logging import get_logger
from .models import Recording

logger = get_logger(__name__)


@dataclass(frozen=True)
class Launcher:
    """How to open a URL on one platform."""

    command: str
    prefix_args: tuple[str, ...] = ()
    fire_and_forget: bool = False

    def argv(self, url: str) -> list[str]:
        return [self.command, *self.prefix_args, url]


LAUNCHERS: dict[str, Launcher] = {
    "darwin": Launcher("open"),
    "win32": Launcher("cmd", ("/c", "start", ""), fire_and_forget=True),
}
DEFAULT_LAUNCHER = Launcher("xdg-open")


def launcher_for(platform: str) -> Launcher:
    """Get the launcher for a ``sys.platform`` value."""
    return LAUNCHERS.get(platform, DEFAULT_LAUNCHER)


class BrowserLauncher:
    """Opens archive pages with the platform's URL handler."""

    def __init__(
        self,
        platform: str | None = None,
        popen: Callable[..., Any] = subprocess.Popen,
    ):
        """Initialize the launcher.

        Args:
            platform: ``sys.platform`` style identifier, defaults to the running platform
            popen: Process factory with the ``subprocess.Popen`` signature
        """
        self.launcher = launcher_for(platform or sys.platform)
        self._popen = popen

    def open(self, target: Recording | str) -> None:
        """Open a recording (or a raw URL) in the browser.

        Raises:
            BrowserLaunchError: the launcher could not be spawned, or exited
                non-zero on a platform where the exit code is checked
        """
        url = target if isinstance(target, str) else target.url
        argv = self.launcher.argv(url)
        logger.info("browser_launch", command=self.launcher.command, url=url)

        try:
            process = self._popen(
                argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            logger.info("browser_launch_failed", command=self.launcher.command, error=str(e))
            raise BrowserLaunchError(f"Failed to open browser: {e}") from e

        if self.launcher.fire_and_forget:
            return

        exit_code = process.wait()
        if exit_code != 0:
            logger.info("browser_launch_failed", command=self.launcher.command, exit_code=exit_code)
            raise BrowserLaunchError(
                f"Failed to open browser (exit code {exit_code})",
                exit_code=exit_code,
            )
