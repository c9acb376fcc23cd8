"""
Simulated input and clock devices.

Keys are scripted per frame so runs are reproducible.
"""

from collections import deque

from ...hardware.base import Clock, Key, KeyInput


class ScriptedKeys(KeyInput):
    """
    Key source driven by a frame script.

    ``script`` maps a poll index (0 for the first poll) to the key that
    becomes available at that poll. Keys can also be queued directly
    with ``press``.
    """

    def __init__(self, script: dict[int, Key] | None = None) -> None:
        self._script = dict(script or {})
        self._queue: deque[Key] = deque()
        self.polls = 0

    def press(self, key: Key) -> None:
        """Queue a key for the next poll."""
        self._queue.append(key)

    def _release_scripted(self) -> None:
        key = self._script.pop(self.polls, None)
        if key is not None:
            self._queue.append(key)

    def key_pending(self) -> bool:
        self._release_scripted()
        return bool(self._queue)

    def poll_key(self) -> Key | None:
        self._release_scripted()
        self.polls += 1
        return self._queue.popleft() if self._queue else None


class ManualClock(Clock):
    """Clock that records sleeps instead of blocking."""

    def __init__(self) -> None:
        self.elapsed_ms = 0
        self.sleeps: list[int] = []

    def sleep_millis(self, ms: int) -> None:
        if ms < 0:
            raise ValueError("Cannot sleep a negative duration")
        self.sleeps.append(ms)
        self.elapsed_ms += ms
