"""Wall-clock adapter."""

import logging
import time
from datetime import datetime

logger = logging.getLogger(__name__)


class SystemClock:
    """
    Local wall clock.

    Implements Clock protocol. Waits are measured against an absolute
    deadline, re-reading the clock after every nap so time spent elsewhere
    never accumulates as drift.
    """

    def __init__(self, max_step: float = 60.0):
        self.max_step = max(0.1, float(max_step))

    def now(self) -> datetime:
        return datetime.now()

    def sleep_until(self, deadline: datetime) -> None:
        """Block until now() >= deadline."""
        while True:
            remaining = (deadline - self.now()).total_seconds()
            if remaining <= 0:
                return
            logger.debug(f"{remaining:.1f}s until {deadline:%H:%M}")
            time.sleep(min(remaining, self.max_step))
