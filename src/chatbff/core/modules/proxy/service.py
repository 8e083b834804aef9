import json

import httpx
import structlog

from chatbff.config import Config
from chatbff.core.core import Service
from chatbff.core.modules.proxy.models import (
    BufferedReply,
    StreamedReply,
    UpstreamReply,
    UpstreamRequest,
    is_stream_content_type,
)
from chatbff.core.modules.proxy.relay import StreamRelay
from chatbff.errors import UpstreamError

logger = structlog.get_logger(__name__)


class ProxyService(Service):
    """Forwards authenticated calls to the Headless RAG API."""

    def __init__(self, config: Config, transport: httpx.AsyncBaseTransport | None = None) -> None:
        super().__init__(config)
        self._stream_buffer_chunks = config.stream_buffer_chunks
        self._client = httpx.AsyncClient(
            base_url=config.rag_api_url,
            timeout=httpx.Timeout(config.upstream_timeout, connect=config.upstream_connect_timeout),
            transport=transport,
        )

    async def on_stop(self) -> None:
        """Close pooled upstream connections."""
        await self._client.aclose()

    async def forward(self, request: UpstreamRequest) -> UpstreamReply:
        """Send one request upstream and pick buffered or streaming mode from its content type.

        Raises:
            UpstreamError: the upstream could not be reached, or a buffered reply was not JSON.
        """
        upstream_request = self._client.build_request(
            request.method,
            request.path,
            headers=self._build_headers(request.user_email),
            content=request.body,
        )
        try:
            response = await self._client.send(upstream_request, stream=True)
        except Exception as e:
            logger.exception("upstream_request_failed", method=request.method, path=request.path)
            raise UpstreamError(request.error_message) from e

        content_type = response.headers.get("content-type")
        if request.allow_stream and is_stream_content_type(content_type):
            logger.debug("upstream_stream_opened", path=request.path, status_code=response.status_code)
            return StreamedReply(
                status_code=response.status_code,
                content_type=content_type or "text/event-stream",
                relay=StreamRelay(response, max_chunks=self._stream_buffer_chunks),
            )

        try:
            content = await response.aread()
            if content.strip():
                json.loads(content)
        except Exception as e:
            logger.exception("upstream_response_invalid", method=request.method, path=request.path)
            raise UpstreamError(request.error_message) from e
        finally:
            await response.aclose()

        return BufferedReply(status_code=response.status_code, content=content)

    def _build_headers(self, user_email: str) -> dict[str, str]:
        return {
            "X-API-Key": self.config.rag_api_key,
            "X-User-Email": user_email,
            "Content-Type": "application/json",
        }
