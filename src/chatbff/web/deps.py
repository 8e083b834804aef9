import json
from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from chatbff.app import App
from chatbff.core.modules.session.models import Session
from chatbff.errors import ValidationError

SESSION_HEADER = "X-Session-ID"

# Security schemes
session_header_scheme = APIKeyHeader(
    name=SESSION_HEADER,
    scheme_name="SessionHeader",
    description="Session id returned by POST /auth/login",
    auto_error=False,
)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_session_id(session_id: Annotated[str | None, Depends(session_header_scheme)] = None) -> str | None:
    """Raw session id from the X-Session-ID header, if any."""
    return session_id


async def get_session(
    app: Annotated[App, Depends(get_app)],
    session_id: Annotated[str | None, Depends(get_session_id)],
) -> Session:
    """Resolve X-Session-ID to a live session or fail with 401."""
    return app.authenticate(session_id)


async def get_json_body(request: Request) -> bytes:
    """Caller's JSON body as raw bytes. An empty body becomes '{}'."""
    body = await request.body()
    if not body.strip():
        return b"{}"
    try:
        json.loads(body)
    except ValueError as e:
        raise ValidationError("Invalid JSON body") from e
    return body


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
SessionIdDep = Annotated[str | None, Depends(get_session_id)]
SessionDep = Annotated[Session, Depends(get_session)]
JsonBodyDep = Annotated[bytes, Depends(get_json_body)]
