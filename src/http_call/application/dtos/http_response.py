from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from http_call.application.ports.transport_port import ResponseStreamPort


class HttpResponse:
    """Response wrapper: status, headers and either a decoded body or, in raw mode, the live stream."""

    def __init__(
        self,
        status_code: int,
        headers: Mapping[str, str],
        url: str,
        *,
        body: Any = None,
        stream: ResponseStreamPort | None = None,
    ) -> None:
        self.status_code = status_code
        self.headers = dict(headers)
        self.url = url
        self.body = body
        self.stream = stream

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    def __repr__(self) -> str:
        mode = "stream" if self.stream is not None else "body"
        return f"<HttpResponse [{self.status_code}] {self.url} ({mode})>"
