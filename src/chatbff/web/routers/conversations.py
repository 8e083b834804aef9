from urllib.parse import quote

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from chatbff.web.deps import AppDep, JsonBodyDep, SessionDep, get_session
from chatbff.web.openapi import ErrorResponse
from chatbff.web.responses import proxy_response

router = APIRouter(
    prefix="/api/conversations",
    tags=["conversations"],
    dependencies=[Depends(get_session)],
    responses={
        401: {"model": ErrorResponse, "description": "Missing, invalid or expired session"},
        500: {"model": ErrorResponse, "description": "RAG service unavailable"},
    },
)


def conversation_path(conversation_id: str) -> str:
    return f"/api/conversations/{quote(conversation_id, safe='')}"


@router.get("", summary="List conversations", operation_id="listConversations")
async def list_conversations(app: AppDep, session: SessionDep) -> Response:
    reply = await app.forward(session, "GET", "/api/conversations", "Failed to get conversations")
    return proxy_response(reply)


@router.post("", summary="Create conversation", operation_id="createConversation")
async def create_conversation(app: AppDep, session: SessionDep, body: JsonBodyDep) -> Response:
    reply = await app.forward(session, "POST", "/api/conversations", "Failed to create conversation", body=body)
    return proxy_response(reply)


@router.get("/{conversation_id}", summary="Get conversation with messages", operation_id="getConversation")
async def get_conversation(conversation_id: str, app: AppDep, session: SessionDep) -> Response:
    reply = await app.forward(session, "GET", conversation_path(conversation_id), "Failed to get conversation")
    return proxy_response(reply)


@router.put("/{conversation_id}", summary="Update conversation", operation_id="updateConversation")
async def update_conversation(conversation_id: str, app: AppDep, session: SessionDep, body: JsonBodyDep) -> Response:
    reply = await app.forward(
        session, "PUT", conversation_path(conversation_id), "Failed to update conversation", body=body
    )
    return proxy_response(reply)


@router.delete("/{conversation_id}", summary="Delete conversation", operation_id="deleteConversation")
async def delete_conversation(conversation_id: str, app: AppDep, session: SessionDep) -> Response:
    reply = await app.forward(session, "DELETE", conversation_path(conversation_id), "Failed to delete conversation")
    return proxy_response(reply)
