from fastapi import APIRouter, Depends
from fastapi.responses import Response

from chatbff.web.deps import AppDep, JsonBodyDep, SessionDep, get_session
from chatbff.web.openapi import ErrorResponse
from chatbff.web.responses import proxy_response

router = APIRouter(
    prefix="/api/filters",
    tags=["filters"],
    dependencies=[Depends(get_session)],
    responses={
        401: {"model": ErrorResponse, "description": "Missing, invalid or expired session"},
        500: {"model": ErrorResponse, "description": "RAG service unavailable"},
    },
)


@router.get("", summary="Get active filters", operation_id="getFilters")
async def get_filters(app: AppDep, session: SessionDep) -> Response:
    reply = await app.forward(session, "GET", "/api/filters", "Failed to get filters")
    return proxy_response(reply)


@router.put("", summary="Update active filters", operation_id="updateFilters")
async def update_filters(app: AppDep, session: SessionDep, body: JsonBodyDep) -> Response:
    reply = await app.forward(session, "PUT", "/api/filters", "Failed to update filters", body=body)
    return proxy_response(reply)
