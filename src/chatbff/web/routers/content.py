"""Read-only content pages served by the RAG API."""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from chatbff.web.deps import AppDep, SessionDep, get_session
from chatbff.web.openapi import ErrorResponse
from chatbff.web.responses import proxy_response

router = APIRouter(
    prefix="/api",
    tags=["content"],
    dependencies=[Depends(get_session)],
    responses={
        401: {"model": ErrorResponse, "description": "Missing, invalid or expired session"},
        500: {"model": ErrorResponse, "description": "RAG service unavailable"},
    },
)


@router.get("/changelog", summary="Get changelog entries", operation_id="getChangelog")
async def get_changelog(app: AppDep, session: SessionDep) -> Response:
    reply = await app.forward(session, "GET", "/api/changelog", "Failed to get changelog")
    return proxy_response(reply)


@router.get("/onboarding", summary="Get onboarding content", operation_id="getOnboarding")
async def get_onboarding(app: AppDep, session: SessionDep) -> Response:
    reply = await app.forward(session, "GET", "/api/onboarding", "Failed to get onboarding content")
    return proxy_response(reply)


@router.get("/about", summary="Get about content", operation_id="getAbout")
async def get_about(app: AppDep, session: SessionDep) -> Response:
    reply = await app.forward(session, "GET", "/api/about", "Failed to get about content")
    return proxy_response(reply)
