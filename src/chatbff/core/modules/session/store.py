"""Session storage backends."""

import secrets
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timedelta

from chatbff.core.modules.session.models import Session, SessionId
from chatbff.utils import now


class SessionStore(ABC):
    """Storage contract for sessions. Lookup is by id only."""

    @abstractmethod
    def create(self, email: str) -> SessionId: ...

    @abstractmethod
    def get(self, session_id: SessionId) -> Session | None:
        """Return the live session, or None if unknown or expired."""

    @abstractmethod
    def delete(self, session_id: SessionId) -> None: ...

    @abstractmethod
    def sweep(self) -> int:
        """Remove every expired session, returning how many were removed."""


class MemorySessionStore(SessionStore):
    """Dict-backed store. All sessions are lost on restart.

    No method awaits, so mutations never interleave under a single event loop.
    """

    def __init__(self, ttl: timedelta, clock: Callable[[], datetime] = now) -> None:
        self._ttl = ttl
        self._clock = clock
        self._sessions: dict[SessionId, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self, email: str) -> SessionId:
        session_id = SessionId(secrets.token_urlsafe(32))
        self._sessions[session_id] = Session(id=session_id, email=email, created_at=self._clock())
        return session_id

    def get(self, session_id: SessionId) -> Session | None:
        session = self._sessions.get(session_id)
        if session is None:
            return None
        if self._is_expired(session, self._clock()):
            del self._sessions[session_id]
            return None
        return session

    def delete(self, session_id: SessionId) -> None:
        self._sessions.pop(session_id, None)

    def sweep(self) -> int:
        current = self._clock()
        expired = [session_id for session_id, session in self._sessions.items() if self._is_expired(session, current)]
        for session_id in expired:
            del self._sessions[session_id]
        return len(expired)

    def _is_expired(self, session: Session, current: datetime) -> bool:
        return current - session.created_at > self._ttl
