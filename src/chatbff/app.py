from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
import structlog

from chatbff.config import Config
from chatbff.core.core import Core
from chatbff.core.modules.proxy.models import HttpMethod, UpstreamReply, UpstreamRequest
from chatbff.core.modules.session.models import Session, SessionId, User
from chatbff.core.modules.session.store import SessionStore
from chatbff.errors import AccessDeniedError, ValidationError
from chatbff.utils import email_domain, is_email

logger = structlog.get_logger(__name__)


class App:
    """Facade for all application operations, checks identity before delegating to Core."""

    def __init__(
        self,
        config: Config,
        session_store: SessionStore | None = None,
        upstream_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._core = Core(config, session_store=session_store, upstream_transport=upstream_transport)

    @property
    def config(self) -> Config:
        return self._core.config

    @property
    def core(self) -> Core:
        return self._core

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    def authenticate(self, session_id: str | None) -> Session:
        """Resolve a session id into the caller's session."""
        return self._core.services.session.get_session(session_id)

    def login(self, email: object) -> tuple[User, SessionId]:
        """Sign in by email, allowed when its domain is on the allowlist."""
        if not email or not isinstance(email, str):
            raise ValidationError("Email is required")
        if not is_email(email):
            logger.info("login_invalid_email")
            raise ValidationError("Invalid email format")

        domain = email_domain(email)
        allowed = {allowed_domain.lower() for allowed_domain in self.config.allowed_domains}
        if domain not in allowed:
            logger.warning("login_rejected", domain=domain)
            raise AccessDeniedError(
                "Domain not authorized",
                detail=f'The email domain "{domain}" is not authorized to access this application.',
            )

        normalized = email.lower()
        session_id = self._core.services.session.create_session(normalized)
        logger.info("login_accepted", email=normalized)
        return User(email=normalized), session_id

    def logout(self, session_id: str | None) -> None:
        """Drop the session if there is one. Unknown ids are ignored."""
        if session_id:
            self._core.services.session.invalidate_session(session_id)

    def get_current_user(self, session: Session) -> User:
        return User(email=session.email)

    async def forward(
        self,
        session: Session,
        method: HttpMethod,
        path: str,
        error_message: str,
        body: bytes | None = None,
        allow_stream: bool = False,
    ) -> UpstreamReply:
        """Forward a call to the RAG API as the session's user."""
        request = UpstreamRequest(
            method=method,
            path=path,
            user_email=session.email,
            body=body,
            error_message=error_message,
            allow_stream=allow_stream,
        )
        return await self._core.services.proxy.forward(request)
