import asyncio
import contextlib
from datetime import timedelta

import structlog

from chatbff.config import Config
from chatbff.core.core import Service
from chatbff.core.modules.session.models import Session, SessionId
from chatbff.core.modules.session.store import MemorySessionStore, SessionStore
from chatbff.errors import AuthenticationError

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Service for managing browser sessions and their periodic cleanup."""

    def __init__(self, config: Config, store: SessionStore | None = None) -> None:
        super().__init__(config)
        if store is None:
            store = MemorySessionStore(ttl=timedelta(seconds=config.session_ttl_seconds))
        self.store = store
        self._sweep_interval = config.session_sweep_interval_seconds
        self._sweep_task: asyncio.Task[None] | None = None

    async def on_start(self) -> None:
        """Start the background sweep."""
        self._sweep_task = asyncio.create_task(self._sweep_loop(), name="session-sweep")

    async def on_stop(self) -> None:
        """Cancel the background sweep."""
        if self._sweep_task is None:
            return
        self._sweep_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._sweep_task
        self._sweep_task = None

    def create_session(self, email: str) -> SessionId:
        return self.store.create(email)

    def get_session(self, session_id: str | None) -> Session:
        """Resolve a session id, raising AuthenticationError if it is missing or dead."""
        if not session_id:
            raise AuthenticationError("No session ID provided")
        session = self.store.get(SessionId(session_id))
        if session is None:
            raise AuthenticationError("Invalid or expired session")
        return session

    def invalidate_session(self, session_id: str) -> None:
        self.store.delete(SessionId(session_id))

    def sweep(self) -> int:
        removed = self.store.sweep()
        logger.debug("sessions_swept", removed=removed)
        return removed

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(self._sweep_interval)
            try:
                self.sweep()
            except Exception:
                logger.exception("session_sweep_failed")
