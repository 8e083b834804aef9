from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from chatbff.core.modules.session.models import User
from chatbff.web.deps import AppDep, SessionDep, SessionIdDep
from chatbff.web.openapi import ErrorResponse

router = APIRouter(prefix="/auth", tags=["auth"])


class LoginRequest(BaseModel):
    """Domain-based sign in."""

    email: Any = Field(None, description="Email address whose domain must be on the allowlist")


class LoginResponse(BaseModel):
    """Signed-in user and the session id to send as X-Session-ID."""

    model_config = ConfigDict(populate_by_name=True)

    user: User
    session_id: str = Field(..., alias="sessionId", description="Session id to send as X-Session-ID")


class MeResponse(BaseModel):
    user: User


class LogoutResponse(BaseModel):
    success: bool = True


@router.post(
    "/login",
    summary="Sign in",
    description="Sign in with an email address. The email domain must be on the configured allowlist.",
    operation_id="login",
    responses={
        200: {"description": "Signed in"},
        400: {"model": ErrorResponse, "description": "Missing or malformed email"},
        403: {"model": ErrorResponse, "description": "Email domain not authorized"},
    },
)
async def login(login_data: LoginRequest, app: AppDep) -> LoginResponse:
    user, session_id = app.login(login_data.email)
    return LoginResponse(user=user, session_id=session_id)


@router.post(
    "/logout",
    summary="End session",
    description="Delete the session named by X-Session-ID. Succeeds even without a session.",
    operation_id="logout",
)
async def logout(app: AppDep, session_id: SessionIdDep) -> LogoutResponse:
    app.logout(session_id)
    return LogoutResponse()


@router.get(
    "/me",
    summary="Get current user",
    description="Get the email of the signed-in user.",
    operation_id="getCurrentUser",
    responses={
        200: {"description": "Current user"},
        401: {"model": ErrorResponse, "description": "Missing, invalid or expired session"},
    },
)
async def get_me(app: AppDep, session: SessionDep) -> MeResponse:
    return MeResponse(user=app.get_current_user(session))
