from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, Literal, Union

from http_call.config import settings

Method = Literal["GET", "POST", "PATCH", "PUT", "DELETE"]

# Hooks may return a replacement, None (keep the mutated input), or an awaitable of either.
RequestMiddleware = Callable[[Any], Union[Any, Awaitable[Any]]]
ResponseMiddleware = Callable[[Any], Union[Any, Awaitable[Any]]]

_ALIASES = {
    "requestMiddleware": "request_middleware",
    "responseMiddleware": "response_middleware",
}


@dataclass
class RequestOptions:
    """Partial request configuration. ``None`` means "not set by this source"."""

    method: Method | None = None
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    raw: bool | None = None
    host: str | None = None
    protocol: str | None = None
    port: int | None = None
    path: str | None = None
    request_middleware: RequestMiddleware | None = None
    response_middleware: ResponseMiddleware | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def items(self) -> list[tuple[str, Any]]:
        """Return the (key, value) pairs this source actually sets."""
        pairs: list[tuple[str, Any]] = []
        for f in fields(self):
            if f.name == "extra":
                continue
            value = getattr(self, f.name)
            if f.name == "headers":
                if value:
                    pairs.append(("headers", value))
            elif value is not None:
                pairs.append((f.name, value))
        pairs.extend(self.extra.items())
        return pairs


_FIELDS = {f.name for f in fields(RequestOptions)} - {"headers", "extra"}

OptionsSource = Union[RequestOptions, Mapping[str, Any], None]


def set_header(headers: dict[str, str], name: str, value: str) -> None:
    """Set ``name``, dropping any existing header that differs from it only in case."""
    lowered = name.lower()
    for existing in [k for k in headers if k.lower() == lowered and k != name]:
        del headers[existing]
    headers[name] = value


def default_options() -> RequestOptions:
    return RequestOptions(headers={"user-agent": settings.user_agent})


def merge_options(*sources: OptionsSource) -> RequestOptions:
    """Merge option sources, lowest precedence first.

    ``headers`` are merged name by name (later sources win per name, names
    compared without case, the later spelling kept); every other key is
    last-write-wins. Unknown keys are carried in ``extra``.
    """
    merged = RequestOptions()
    for source in sources:
        if source is None:
            continue
        pairs = source.items() if isinstance(source, RequestOptions) else list(source.items())
        for key, value in pairs:
            key = _ALIASES.get(key, key)
            if key == "headers":
                for name, header_value in (value or {}).items():
                    set_header(merged.headers, name, header_value)
            elif key in _FIELDS:
                setattr(merged, key, value)
            else:
                merged.extra[key] = value
    return merged
