from __future__ import annotations

from collections.abc import AsyncIterator
from types import TracebackType

import httpx


class HttpxResponseStream:
    """Live httpx response in raw mode.

    Iterating yields the bytes exactly as the transport emitted them (no
    content decoding). Exhausting the iterator or calling :meth:`aclose`
    releases the response and, when owned, the per-call transport.
    """

    def __init__(self, response: httpx.Response, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._response = response
        self._transport = transport
        self.status_code = response.status_code
        self.headers = {k.lower(): v for k, v in response.headers.items()}

    def __aiter__(self) -> AsyncIterator[bytes]:
        return self.aiter_bytes()

    async def aiter_bytes(self) -> AsyncIterator[bytes]:
        try:
            if self._response.is_stream_consumed:
                # Already buffered by whoever built the response.
                if self._response.content:
                    yield self._response.content
            else:
                async for chunk in self._response.aiter_raw():
                    yield chunk
        finally:
            await self.aclose()

    async def aiter_text(self) -> AsyncIterator[str]:
        try:
            async for chunk in self._response.aiter_text():
                yield chunk
        finally:
            await self.aclose()

    async def aclose(self) -> None:
        await self._response.aclose()
        if self._transport is not None:
            transport, self._transport = self._transport, None
            await transport.aclose()

    async def __aenter__(self) -> "HttpxResponseStream":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"<HttpxResponseStream [{self.status_code}]>"
