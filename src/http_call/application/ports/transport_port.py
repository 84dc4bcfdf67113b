from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from typing import Protocol

from http_call.domain.descriptor import RequestDescriptor


class ResponseStreamPort(Protocol):
    """Live, unbuffered response handed back by a transport."""

    status_code: int
    headers: Mapping[str, str]

    def aiter_bytes(self) -> AsyncIterator[bytes]: ...
    def aiter_text(self) -> AsyncIterator[str]: ...
    async def aclose(self) -> None: ...


class TransportPort(Protocol):
    """Sends one request descriptor and resolves once the response head arrives.

    Connection failures propagate unchanged; nothing is retried.
    """

    async def send(self, request: RequestDescriptor) -> ResponseStreamPort: ...
