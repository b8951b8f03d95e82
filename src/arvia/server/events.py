"""Event models for dev server file watching.

Defines the file change payload handed to the reload callback, plus the
debounce gate that collapses bursts of writes into a single reload.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path


@dataclass
class FileChange:
    """A file change accepted by the watcher.

    Attributes:
        change_type: Type of change - only 'modified' is propagated today
        path: Path to the changed file
        timestamp: Monotonic clock reading when the change was accepted
    """

    change_type: str
    path: Path
    timestamp: float


class DebounceGate:
    """Timestamp gate that rejects changes inside a quiet interval.

    A change is accepted only if it arrives more than ``interval`` seconds
    after the previously accepted one. Rejected changes are dropped, not
    queued, so a burst fires exactly once, on the event that opens the
    window.

    Owned by a single watcher loop; not safe to share between tasks.
    """

    def __init__(
        self,
        interval: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.interval = interval
        self._clock = clock
        self._last_accepted: float | None = None

    def accept(self, now: float | None = None) -> bool:
        """Return True and record ``now`` if the quiet interval has elapsed."""
        if now is None:
            now = self._clock()
        if self._last_accepted is not None and now - self._last_accepted <= self.interval:
            return False
        self._last_accepted = now
        return True

    @property
    def last_accepted(self) -> float | None:
        return self._last_accepted

    def now(self) -> float:
        return self._clock()


__all__ = [
    "FileChange",
    "DebounceGate",
]
