"""Clock interface."""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Interface for reading and waiting on the wall clock."""

    def now(self) -> datetime:
        """Current local time."""
        ...

    def sleep_until(self, deadline: datetime) -> None:
        """Block until the wall clock reaches deadline. Returns at once if it already has."""
        ...
