"""Bounded pipe from an upstream streamed response to a client response."""

import asyncio
import contextlib
from collections.abc import AsyncIterator
from typing import cast

import httpx
import structlog

logger = structlog.get_logger(__name__)

_END = object()


class StreamRelay:
    """Relays decoded upstream chunks in arrival order.

    A producer task reads the upstream body into a bounded queue and
    `chunks()` drains it. Closing the iterator, for example when the client
    disconnects, cancels the producer and closes the upstream response.
    An upstream failure ends the iteration after the chunks already relayed.
    """

    def __init__(self, response: httpx.Response, max_chunks: int = 1) -> None:
        self._response = response
        self._queue: asyncio.Queue[object] = asyncio.Queue(maxsize=max(1, max_chunks))

    async def chunks(self) -> AsyncIterator[str]:
        producer = asyncio.create_task(self._produce(), name="upstream-stream-reader")
        try:
            while True:
                item = await self._queue.get()
                if item is _END:
                    break
                yield cast(str, item)
        finally:
            producer.cancel()
            await asyncio.shield(self._close(producer))

    async def aclose(self) -> None:
        """Close the upstream response without relaying anything."""
        await self._response.aclose()

    async def _produce(self) -> None:
        try:
            async for chunk in self._response.aiter_text():
                if chunk:
                    await self._queue.put(chunk)
        except Exception as e:
            logger.warning("upstream_stream_interrupted", url=str(self._response.url), error=str(e))
        await self._queue.put(_END)

    async def _close(self, producer: asyncio.Task[None]) -> None:
        with contextlib.suppress(asyncio.CancelledError):
            await producer
        await self._response.aclose()
