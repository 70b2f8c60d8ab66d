"""Recording source interface.

The workflow only depends on this protocol, so anything that can look up
recordings by calendar day can stand in for the archive client.
"""

from datetime import date
from typing import Protocol, runtime_checkable

from ..models import Recording


@runtime_checkable
class RecordingSource(Protocol):
    """Protocol for recording lookups by calendar day."""

    @property
    def name(self) -> str:
        """Unique identifier for this data source."""
        ...

    def fetch_by_calendar_date(self, day: date) -> list[Recording]:
        """Get recordings made on the month and day of ``day``, any year.

        Args:
            day: Target date; only month and day are used

        Returns:
            Recordings whose date matches the requested month and day
        """
        ...

    def fetch_for_today(self) -> list[Recording]:
        """Get recordings made on today's month and day."""
        ...

