from fastapi import APIRouter, Depends
from fastapi.responses import Response

from chatbff.web.deps import AppDep, JsonBodyDep, SessionDep, get_session
from chatbff.web.openapi import ErrorResponse
from chatbff.web.responses import proxy_response

router = APIRouter(prefix="/api", tags=["rag"], dependencies=[Depends(get_session)])


@router.post(
    "/rag",
    summary="Ask the RAG service",
    description=(
        "Forward a query to the Headless RAG API. The body "
        "`{query, conversation-id?, model?, rerank-top-k?, context-top-k?, max-context-length?}` "
        "is passed through unchanged. Streamed upstream answers are relayed chunk by chunk; "
        "otherwise the upstream JSON answer is returned as is."
    ),
    operation_id="queryRag",
    responses={
        200: {
            "description": "Answer as JSON, or a streamed text body",
            "content": {"application/json": {}, "text/event-stream": {}},
        },
        401: {"model": ErrorResponse, "description": "Missing, invalid or expired session"},
        500: {"model": ErrorResponse, "description": "RAG service unavailable"},
    },
)
async def query_rag(app: AppDep, session: SessionDep, body: JsonBodyDep) -> Response:
    reply = await app.forward(session, "POST", "/api/rag", "RAG query failed", body=body, allow_stream=True)
    return proxy_response(reply)
