from __future__ import annotations

from pprint import pformat
from typing import Any

from httpx import TransportError

__all__ = [
    "HttpCallError",
    "InvalidURL",
    "MalformedResponse",
    "HTTPError",
    "StreamUnavailable",
    "TransportError",
]


class HttpCallError(Exception):
    """Base class for errors raised by http_call itself.

    Connection-level failures are not wrapped: they surface as the
    ``httpx.TransportError`` raised by the transport (re-exported here).
    """


class InvalidURL(HttpCallError, ValueError):
    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Invalid URL {url!r}: {reason}")
        self.url = url
        self.reason = reason


class MalformedResponse(HttpCallError):
    """The response declared JSON but the body did not parse."""

    def __init__(self, text: str, *, status_code: int | None = None, content_type: str | None = None) -> None:
        snippet = text[:200].replace("\n", " ")
        super().__init__(f"Malformed JSON response (status={status_code}, CT={content_type}) snippet='{snippet}'")
        self.text = text
        self.status_code = status_code
        self.content_type = content_type


class StreamUnavailable(HttpCallError):
    """A raw-mode call ended without a live stream to hand back (e.g. a response hook dropped it)."""

    def __init__(self, url: str) -> None:
        super().__init__(f"No response stream available for {url}")
        self.url = url


class HTTPError(HttpCallError):
    """A response arrived but its status code was outside [200, 300).

    Build it with :meth:`from_exchange`; the diagnostic fields are read-only.
    """

    def __init__(self, method: str, url: str, status_code: int, body: Any) -> None:
        super().__init__(f"HTTP Error {status_code} for {method} {url}\n{pformat(body)}")
        self._method = method
        self._url = url
        self._status_code = status_code
        self._body = body

    @classmethod
    def from_exchange(cls, request: Any, response: Any) -> "HTTPError":
        """Build the error from a request descriptor and its response wrapper."""
        return cls(request.method, request.url, response.status_code, response.body)

    @property
    def method(self) -> str:
        return self._method

    @property
    def url(self) -> str:
        return self._url

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def body(self) -> Any:
        return self._body
