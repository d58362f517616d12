"""
Registry of editing sessions for the Reflex UI.

Each browser session gets one DocumentController, looked up by client token.
Reflex does not tell the state when a browser goes away, so sessions end by
inactivity: a controller idle longer than the TTL is released, and when the
registry is full the least recently used session is released first.
"""

import os
import time
from collections import OrderedDict
from threading import Lock
from typing import Callable

from invoice_editor.controller import DocumentController
from invoice_editor.lib import logs

LOG = logs.logger(__file__)

# Configuration from environment
MAX_SESSIONS = int(os.getenv("INVOICE_EDITOR_MAX_SESSIONS", "500"))
SESSION_TTL_SECONDS = float(os.getenv("INVOICE_EDITOR_SESSION_TTL", "3600"))


class SessionRegistry:
    """
    Bounded, idle-expiring map of client token to DocumentController.

    Attributes:
        max_sessions: Most sessions kept at once.
        ttl_seconds: Idle time after which a session is released.
    """

    def __init__(
        self,
        max_sessions: int = MAX_SESSIONS,
        ttl_seconds: float = SESSION_TTL_SECONDS,
        factory: Callable[[], DocumentController] = DocumentController,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_sessions < 1:
            raise ValueError(f"max_sessions must be at least 1, got {max_sessions}")
        self.max_sessions = max_sessions
        self.ttl_seconds = ttl_seconds
        self._factory = factory
        self._clock = clock
        self._lock = Lock()
        # token -> (controller, last access); oldest access first
        self._sessions: "OrderedDict[str, tuple[DocumentController, float]]" = OrderedDict()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def __contains__(self, token: str) -> bool:
        with self._lock:
            return token in self._sessions

    def get(self, token: str) -> DocumentController:
        """Return the controller for a token, creating it on first use."""
        now = self._clock()
        with self._lock:
            self._expire(now)
            entry = self._sessions.pop(token, None)
            if entry is None:
                LOG.info("New editing session - token:%s", token)
                controller = self._factory()
            else:
                controller = entry[0]
            self._sessions[token] = (controller, now)
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                LOG.info("Session evicted (capacity) - token:%s", evicted)
            return controller

    def release(self, token: str) -> bool:
        """Drop a session; returns False if it was not registered."""
        with self._lock:
            released = self._sessions.pop(token, None) is not None
        if released:
            LOG.info("Session released - token:%s", token)
        return released

    def _expire(self, now: float) -> None:
        expired = [
            token
            for token, (_, last_access) in self._sessions.items()
            if now - last_access > self.ttl_seconds
        ]
        for token in expired:
            del self._sessions[token]
            LOG.info("Session expired - token:%s", token)
