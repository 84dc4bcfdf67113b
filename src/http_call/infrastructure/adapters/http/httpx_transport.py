from __future__ import annotations

import logging

import httpx

from http_call.application.ports.transport_port import TransportPort
from http_call.domain.descriptor import PLAIN_PROTOCOL, SECURE_PROTOCOL, RequestDescriptor
from http_call.infrastructure.adapters.http.httpx_response_stream import HttpxResponseStream

logger = logging.getLogger(__name__)


def _secure_transport() -> httpx.AsyncHTTPTransport:
    return httpx.AsyncHTTPTransport(verify=httpx.create_ssl_context())


def _plain_transport() -> httpx.AsyncHTTPTransport:
    return httpx.AsyncHTTPTransport()


TRANSPORTS = {
    SECURE_PROTOCOL: _secure_transport,
    PLAIN_PROTOCOL: _plain_transport,
}


class HttpxTransport(TransportPort):
    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Transport adapter backed by httpx.

        - Opens a fresh secure or plaintext transport per request, chosen by protocol
        - Closes that transport together with the response (no pooling)
        - Writes the request body for POST only

        Args:
            transport (httpx.AsyncBaseTransport | None, optional): Fixed transport used
                for every protocol and never closed here (e.g. ``httpx.MockTransport``).
                Defaults to None.
        """
        self._transport = transport

    def select(self, protocol: str) -> tuple[httpx.AsyncBaseTransport, bool]:
        """Returns the transport for ``protocol`` and whether this call owns it."""
        if self._transport is not None:
            return self._transport, False
        return TRANSPORTS[protocol](), True

    async def send(self, request: RequestDescriptor) -> HttpxResponseStream:
        """Sends the request and resolves with the response head.

        Args:
            request (RequestDescriptor): Resolved request.

        Returns:
            HttpxResponseStream: Unread response.
        """
        outgoing = httpx.Request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body if request.method == "POST" else None,
        )
        transport, owned = self.select(request.protocol)
        try:
            response = await transport.handle_async_request(outgoing)
        except Exception:
            if owned:
                await transport.aclose()
            raise
        response.request = outgoing
        logger.debug("%s %s | head received: %s", request.method, request.url, response.status_code)
        return HttpxResponseStream(response, transport if owned else None)
