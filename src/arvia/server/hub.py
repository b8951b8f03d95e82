"""Reload hub: registry of live-reload sessions and the reload broadcast."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

logger = logging.getLogger(__name__)

# The only message a session ever receives
RELOAD_MESSAGE = "reload"


class ReloadSession(Protocol):
    """What the hub needs from a session transport (a starlette WebSocket fits)."""

    async def send_text(self, data: str) -> None: ...

    async def close(self, code: int = 1000, reason: str | None = None) -> None: ...


class ReloadHub:
    """Manage live-reload sessions, one per connected browser tab.

    Every registry operation, including the sends of a broadcast, runs
    under one lock, so a session is never written to while it is being
    removed.
    """

    def __init__(self) -> None:
        self._sessions: set[ReloadSession] = set()
        self._lock = asyncio.Lock()

    async def register(self, session: ReloadSession) -> None:
        """Add an accepted session to the registry."""
        async with self._lock:
            self._sessions.add(session)
            count = len(self._sessions)
        logger.debug(f"Live-reload session connected, total: {count}")

    async def unregister(self, session: ReloadSession) -> None:
        """Remove a session after its read loop ended."""
        async with self._lock:
            self._sessions.discard(session)
            count = len(self._sessions)
        logger.debug(f"Live-reload session disconnected, total: {count}")

    async def broadcast(self) -> int:
        """Send the reload token to every registered session.

        Sessions whose send fails are unregistered and closed.

        Returns:
            Number of sessions the token was delivered to
        """
        async with self._lock:
            if not self._sessions:
                return 0

            failed: list[ReloadSession] = []
            for session in list(self._sessions):
                try:
                    await session.send_text(RELOAD_MESSAGE)
                except Exception as e:
                    logger.debug(f"Dropping live-reload session: {e}")
                    failed.append(session)

            for session in failed:
                self._sessions.discard(session)
                await _close_quietly(session)

            delivered = len(self._sessions)

        logger.info(f"Reload sent to {delivered} session(s)")
        return delivered

    async def close_all(self) -> None:
        """Close and forget every session (server shutdown)."""
        async with self._lock:
            sessions = list(self._sessions)
            self._sessions.clear()
            for session in sessions:
                await _close_quietly(session, code=1001)
        if sessions:
            logger.debug(f"Closed {len(sessions)} live-reload session(s)")

    @property
    def session_count(self) -> int:
        """Number of registered sessions."""
        return len(self._sessions)


async def _close_quietly(session: ReloadSession, code: int = 1000) -> None:
    """Close a session whose transport may already be gone."""
    try:
        await session.close(code=code)
    except Exception as e:
        logger.debug(f"Session close failed: {e}")


__all__ = ["ReloadHub", "ReloadSession", "RELOAD_MESSAGE"]
