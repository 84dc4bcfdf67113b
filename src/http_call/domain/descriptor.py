from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple
from urllib.parse import urlsplit

from http_call.config import settings
from http_call.domain.codecs import FORM_CONTENT_TYPE, encode_form
from http_call.domain.errors import InvalidURL
from http_call.domain.options import RequestOptions, set_header

SECURE_PROTOCOL = "https"
PLAIN_PROTOCOL = "http"
DEFAULT_PORTS = {SECURE_PROTOCOL: 443, PLAIN_PROTOCOL: 80}


class ResolvedURL(NamedTuple):
    protocol: str
    host: str
    port: int
    path: str


def _normalize_protocol(protocol: str) -> str:
    return protocol.rstrip(":").lower()


def resolve_url(url: str, options: RequestOptions | None = None) -> ResolvedURL:
    """Split ``url`` into protocol, host, port and path.

    Explicit ``protocol``/``host``/``port``/``path`` options take precedence
    over the URL; a missing port defaults to 443 for https and 80 for http.
    """
    if not url:
        raise InvalidURL(url, "no url provided")
    options = options or RequestOptions()
    parts = urlsplit(url)
    try:
        url_port = parts.port
    except ValueError as e:
        raise InvalidURL(url, str(e)) from e

    protocol = _normalize_protocol(options.protocol or parts.scheme or settings.default_protocol)
    if protocol not in DEFAULT_PORTS:
        raise InvalidURL(url, f"unsupported protocol {protocol!r}")

    host = options.host or parts.hostname
    if not host:
        raise InvalidURL(url, "no host")

    port = options.port or url_port or DEFAULT_PORTS[protocol]
    try:
        port = int(port)
    except (TypeError, ValueError) as e:
        raise InvalidURL(url, f"invalid port {port!r}") from e

    path = options.path
    if path is None:
        path = parts.path or settings.default_path
        if parts.query:
            path = f"{path}?{parts.query}"
    return ResolvedURL(protocol, host, port, path)


@dataclass
class RequestDescriptor:
    """Fully resolved parameters for one outbound call. Built fresh per call."""

    method: str
    protocol: str
    host: str
    port: int
    path: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    raw: bool = False

    @classmethod
    def build(cls, url: str, options: RequestOptions) -> "RequestDescriptor":
        resolved = resolve_url(url, options)
        method = (options.method or "GET").upper()
        headers: dict[str, str] = {}
        for name, value in options.headers.items():
            set_header(headers, name, value)
        body = None
        if method == "POST":
            body = encode_form(options.body)
            set_header(headers, "Content-Type", FORM_CONTENT_TYPE)
            set_header(headers, "Content-Length", str(len(body.encode("utf-8"))))
        return cls(
            method=method,
            protocol=resolved.protocol,
            host=resolved.host,
            port=resolved.port,
            path=resolved.path,
            headers=headers,
            body=body,
            raw=bool(options.raw),
        )

    @property
    def url(self) -> str:
        netloc = f"[{self.host}]" if ":" in self.host else self.host
        if self.port != DEFAULT_PORTS.get(self.protocol):
            netloc = f"{netloc}:{self.port}"
        return f"{self.protocol}://{netloc}{self.path}"
