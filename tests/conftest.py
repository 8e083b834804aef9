"""Shared pytest fixtures."""

from collections.abc import AsyncGenerator, Awaitable, Callable
from datetime import UTC, datetime, timedelta

import httpx
import pytest

from chatbff.app import App
from chatbff.config import Config
from chatbff.core.modules.session.store import MemorySessionStore
from chatbff.web.server import create_fastapi_app

Responder = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


class FakeUpstream:
    """Stands in for the Headless RAG API and records every request it receives."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responder: Responder = lambda _: httpx.Response(200, json={})

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responder(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def config():
    """Config isolated from any .env file."""
    return Config(
        _env_file=None,
        allowed_domains=["example.com", "Corp.io"],
        rag_api_url="http://rag.test",
        rag_api_key="test-api-key",
        frontend_url="http://frontend.test",
        port=3000,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session_store(config, clock):
    return MemorySessionStore(ttl=timedelta(seconds=config.session_ttl_seconds), clock=clock)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def app_instance(config, session_store, upstream):
    return App(config, session_store=session_store, upstream_transport=upstream.transport())


@pytest.fixture
async def client(app_instance, config) -> AsyncGenerator[httpx.AsyncClient]:
    """HTTP client bound to the FastAPI app with its lifespan running."""
    fastapi_app = create_fastapi_app(app_instance, config)
    async with fastapi_app.router.lifespan_context(fastapi_app):
        transport = httpx.ASGITransport(app=fastapi_app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
            yield http_client


@pytest.fixture
async def session_id(client) -> str:
    """Session id of a signed-in user (user@example.com)."""
    response = await client.post("/auth/login", json={"email": "user@example.com"})
    assert response.status_code == 200
    return response.json()["sessionId"]
