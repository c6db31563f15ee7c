"""
In-memory menu session store.

Sessions are not persisted. A session that has not been read for
``ttl_seconds`` is dropped, like an expired key in a session cache.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, List

from storefront.errors import SessionNotFound
from storefront.integrations.contracts.interfaces import CatalogItem
from storefront.orders.submission import OrderSubmission
from storefront.session.menu_session import MenuSession

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL_SECONDS = 1800


class SessionStore:
    def __init__(
        self,
        submission_factory: Callable[[], OrderSubmission],
        ttl_seconds: float = DEFAULT_SESSION_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._submission_factory = submission_factory
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        # session_id -> MenuSession
        self._sessions: Dict[str, MenuSession] = {}

    def create(self, menu_items: List[CatalogItem]) -> MenuSession:
        now = self._clock()
        self._purge_expired(now)

        session = MenuSession(menu_items, submission=self._submission_factory())
        session.touch(now)
        self._sessions[session.session_id] = session
        logger.info("Created menu session %s with %d items", session.session_id, len(menu_items))
        return session

    def get(self, session_id: str) -> MenuSession:
        now = self._clock()
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFound("Session not found")

        if self._expired(session, now):
            del self._sessions[session_id]
            logger.info("Menu session %s expired", session_id)
            raise SessionNotFound("Session not found")

        session.touch(now)
        return session

    def delete(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def _expired(self, session: MenuSession, now: float) -> bool:
        # Never expire a session mid-checkout.
        if session.submission.processing:
            return False
        return now - session.last_accessed > self.ttl_seconds

    def _purge_expired(self, now: float) -> None:
        stale = [sid for sid, session in self._sessions.items() if self._expired(session, now)]
        for sid in stale:
            del self._sessions[sid]
        if stale:
            logger.info("Dropped %d expired menu sessions", len(stale))

    def __len__(self) -> int:
        return len(self._sessions)
