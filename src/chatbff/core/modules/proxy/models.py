"""Upstream request and reply models. Payloads stay opaque bytes."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from chatbff.core.modules.proxy.relay import StreamRelay

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


class UpstreamRequest(BaseModel):
    """One call to the RAG API on behalf of a signed-in user."""

    method: HttpMethod
    path: str
    user_email: str
    body: bytes | None = None
    error_message: str  # Reported to the caller if the upstream call fails
    allow_stream: bool = False


class BufferedReply(BaseModel):
    """Complete upstream JSON body, passed through unchanged."""

    status_code: int
    content: bytes


class StreamedReply(BaseModel):
    """Upstream body that is relayed to the client as it arrives."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status_code: int
    content_type: str
    relay: StreamRelay


UpstreamReply = BufferedReply | StreamedReply


def is_stream_content_type(content_type: str | None) -> bool:
    """True for text/event-stream and any other '*stream*' media type."""
    return content_type is not None and "stream" in content_type.lower()
