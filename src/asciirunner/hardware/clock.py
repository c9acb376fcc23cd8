"""Wall-clock frame pacing."""

import time

from .base import Clock


class SystemClock(Clock):
    """Sleeps with ``time.sleep``."""

    def sleep_millis(self, ms: int) -> None:
        if ms > 0:
            time.sleep(ms / 1000.0)
