"""Tests for the bounded streaming relay."""

import asyncio

import httpx
import pytest

from chatbff.core.modules.proxy.relay import StreamRelay

UPSTREAM_URL = "http://rag.test/api/rag"


def streamed_response(chunks) -> httpx.Response:
    return httpx.Response(
        200,
        headers={"content-type": "text/event-stream"},
        content=chunks,
        request=httpx.Request("POST", UPSTREAM_URL),
    )


async def collect(relay: StreamRelay) -> list[str]:
    return [chunk async for chunk in relay.chunks()]


class TestStreamRelay:
    async def test_relays_chunks_in_order(self):
        async def upstream():
            for chunk in (b"A", b"B", b"C"):
                yield chunk

        response = streamed_response(upstream())
        assert await collect(StreamRelay(response)) == ["A", "B", "C"]
        assert response.is_closed

    async def test_chunk_delivered_before_next_arrives(self):
        """A chunk reaches the consumer while upstream is still waiting to send the next one."""
        release = asyncio.Event()

        async def upstream():
            yield b"first"
            await release.wait()
            yield b"second"

        chunks = StreamRelay(streamed_response(upstream())).chunks()
        assert await asyncio.wait_for(anext(chunks), timeout=1) == "first"
        release.set()
        assert await asyncio.wait_for(anext(chunks), timeout=1) == "second"
        with pytest.raises(StopAsyncIteration):
            await anext(chunks)

    async def test_utf8_split_across_chunks(self):
        """Multi-byte characters split between chunks decode correctly."""
        encoded = "héllo".encode()

        async def upstream():
            yield encoded[:2]
            yield encoded[2:]

        assert "".join(await collect(StreamRelay(streamed_response(upstream())))) == "héllo"

    async def test_upstream_failure_ends_stream_with_partial_output(self):
        async def upstream():
            yield b"partial"
            raise httpx.ReadError("connection reset")

        response = streamed_response(upstream())
        assert await collect(StreamRelay(response)) == ["partial"]
        assert response.is_closed

    async def test_consumer_close_stops_upstream(self):
        """Closing the client side cancels the reader and closes the upstream body."""
        finished = asyncio.Event()
        never = asyncio.Event()

        async def upstream():
            try:
                yield b"first"
                await never.wait()
                yield b"unreachable"
            finally:
                finished.set()

        response = streamed_response(upstream())
        chunks = StreamRelay(response).chunks()
        assert await anext(chunks) == "first"
        await chunks.aclose()

        assert finished.is_set()
        assert response.is_closed

    async def test_bounded_buffer(self):
        """With one chunk in flight the reader never runs far ahead of the consumer."""
        produced: list[int] = []

        async def upstream():
            for i in range(10):
                produced.append(i)
                yield str(i).encode()

        chunks = StreamRelay(streamed_response(upstream()), max_chunks=1).chunks()
        assert await anext(chunks) == "0"
        await asyncio.sleep(0.01)
        assert len(produced) <= 3
        await chunks.aclose()

    async def test_aclose_without_iterating(self):
        async def upstream():
            yield b"A"

        response = streamed_response(upstream())
        await StreamRelay(response).aclose()
        assert response.is_closed
