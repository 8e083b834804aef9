import asyncio

from fastapi.responses import Response, StreamingResponse
from starlette.types import Receive, Scope, Send

from chatbff.core.modules.proxy.models import StreamedReply, UpstreamReply
from chatbff.core.modules.proxy.relay import StreamRelay

STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


class RelayStreamingResponse(StreamingResponse):
    """Streaming response that always releases the upstream connection.

    The relay's own cleanup only runs once its iterator is started; if sending
    the response head fails first, the upstream response is closed here.
    """

    def __init__(self, relay: StreamRelay, status_code: int, media_type: str) -> None:
        super().__init__(relay.chunks(), status_code=status_code, media_type=media_type, headers=STREAM_HEADERS)
        self.relay = relay

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            await asyncio.shield(self.relay.aclose())


def proxy_response(reply: UpstreamReply) -> Response:
    """Turn an upstream reply into the response sent to the browser."""
    if isinstance(reply, StreamedReply):
        return RelayStreamingResponse(reply.relay, status_code=reply.status_code, media_type=reply.content_type)
    if not reply.content.strip():
        return Response(status_code=reply.status_code)
    return Response(content=reply.content, status_code=reply.status_code, media_type="application/json")
