from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx

from chatbff.config import Config

if TYPE_CHECKING:
    from chatbff.core.modules.proxy.service import ProxyService
    from chatbff.core.modules.session.service import SessionService
    from chatbff.core.modules.session.store import SessionStore


class Service:
    """Base class for services sharing the application config."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class Services:
    """Service registry. Services start in declaration order and stop in reverse."""

    session: SessionService
    proxy: ProxyService

    def __init__(
        self,
        config: Config,
        session_store: SessionStore | None = None,
        upstream_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        from chatbff.core.modules.proxy.service import ProxyService  # noqa: PLC0415
        from chatbff.core.modules.session.service import SessionService  # noqa: PLC0415

        self.session = SessionService(config, store=session_store)
        self.proxy = ProxyService(config, transport=upstream_transport)
        self._services: list[Service] = [self.session, self.proxy]

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        for service in reversed(self._services):
            await service.on_stop()


class Core:
    """Container providing config and all service instances."""

    config: Config
    services: Services

    def __init__(
        self,
        config: Config,
        session_store: SessionStore | None = None,
        upstream_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self.services = Services(config, session_store=session_store, upstream_transport=upstream_transport)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        await self.services.start_all()

    async def on_stop(self) -> None:
        await self.services.stop_all()
