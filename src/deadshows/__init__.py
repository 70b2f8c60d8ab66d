"""deadshows - Grateful Dead recordings from this day in history.

Searches the Internet Archive for recordings made on a calendar day in any
year the band played, groups and ranks them, and opens one in the browser.
"""

__version__ = "0.1.0"

from .cli import main

__all__ = ["main", "__version__"]
