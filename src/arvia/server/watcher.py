"""File system watcher for the dev server.

Watches the source and assets trees with watchfiles and reports debounced
write events to a callback.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Awaitable, Callable, Iterable
from pathlib import Path

from watchfiles import Change, awatch

from arvia.server.events import DebounceGate, FileChange

logger = logging.getLogger(__name__)

# Default quiet interval between two accepted changes
DEFAULT_DEBOUNCE_MS = 100

# How long watchfiles waits for more changes before yielding a batch
DEFAULT_STEP_MS = 50


def collect_watch_set(roots: Iterable[Path]) -> list[Path]:
    """Enumerate every directory beneath each existing root, roots included.

    Args:
        roots: Root directories; missing roots are skipped

    Returns:
        Sorted list of resolved directory paths
    """
    found: set[Path] = set()
    for root in roots:
        root = Path(root)
        if not root.is_dir():
            continue
        for dirpath, _dirnames, _filenames in os.walk(root):
            found.add(Path(dirpath).resolve())
    return sorted(found)


class FileWatcher:
    """Async recursive filesystem watcher with a debounce gate.

    Only write (``modified``) events are considered. Each event that the
    gate accepts is logged and handed to the callback; the rest are
    dropped silently.

    watchfiles watches recursively, so directories created after start
    are observed as well.

    Attributes:
        paths: Root directories to watch
        callback: Async callback invoked for each accepted change
    """

    def __init__(
        self,
        paths: list[Path],
        callback: Callable[[FileChange], Awaitable[None]],
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        step_ms: int = DEFAULT_STEP_MS,
        gate: DebounceGate | None = None,
    ) -> None:
        """Initialize the file watcher.

        Args:
            paths: Root directories to watch for changes
            callback: Async callback(change) invoked on accepted changes
            debounce_ms: Quiet interval enforced between accepted changes
            step_ms: watchfiles batching step
            gate: Pre-built debounce gate (overrides debounce_ms)
        """
        self.paths = [Path(p).resolve() for p in paths]
        self.callback = callback
        self.step_ms = step_ms
        self.gate = gate or DebounceGate(interval=debounce_ms / 1000.0)
        self._task: asyncio.Task[None] | None = None
        self._stop_event = asyncio.Event()

    async def start(self) -> None:
        """Start watching in a background task."""
        if self._task is not None:
            logger.warning("FileWatcher already running")
            return

        self._stop_event.clear()
        self._task = asyncio.create_task(self._watch())

    async def stop(self) -> None:
        """Signal the watch loop to stop and wait for it to finish."""
        if self._task is None:
            return

        self._stop_event.set()
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.debug("FileWatcher stopped")

    async def _watch(self) -> None:
        """Main watch loop. Errors end the loop; they never propagate."""
        roots = [p for p in self.paths if p.is_dir()]
        for missing in set(self.paths) - set(roots):
            logger.debug(f"Not watching missing directory: {missing}")

        if not roots:
            logger.warning("No directories to watch, live reload disabled")
            return

        watch_set = collect_watch_set(roots)
        logger.info(f"Watching {len(watch_set)} directories for changes")

        try:
            async for changes in awatch(
                *roots,
                stop_event=self._stop_event,
                watch_filter=self._watch_filter,
                step=self.step_ms,
            ):
                await self.dispatch(changes)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.error(f"File watcher error: {e}")
            logger.warning("Live reload disabled; static serving continues")

    async def dispatch(self, changes: Iterable[tuple[Change, str]]) -> int:
        """Run one batch of raw changes through the debounce gate.

        Args:
            changes: (change type, path) pairs as yielded by watchfiles

        Returns:
            Number of changes accepted (0 or 1 for a single burst)
        """
        # One reading per batch; a slow callback must not reopen the window
        now = self.gate.now()
        accepted = 0
        for change_type, path_str in sorted(changes, key=lambda c: c[1]):
            if change_type != Change.modified:
                continue

            if not self.gate.accept(now):
                continue

            path = Path(path_str)
            logger.info(f"File changed: {path}")
            accepted += 1
            try:
                await self.callback(FileChange(change_type="modified", path=path, timestamp=now))
            except Exception as e:
                logger.error(f"Error notifying change of {path}: {e}")
        return accepted

    def _watch_filter(self, change: Change, path: str) -> bool:
        """Filter function for watchfiles: write events on files only."""
        return change == Change.modified and not Path(path).is_dir()

    @property
    def is_running(self) -> bool:
        """True while the watch loop task is alive."""
        return self._task is not None and not self._task.done()


__all__ = [
    "FileWatcher",
    "collect_watch_set",
    "DEFAULT_DEBOUNCE_MS",
]
