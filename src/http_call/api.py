"""One-shot helpers: each call builds a fresh :class:`HttpCall` with no instance options."""
from __future__ import annotations

from typing import Any

from http_call.application.dtos.http_response import HttpResponse
from http_call.application.ports.transport_port import ResponseStreamPort
from http_call.client import HttpCall
from http_call.domain.options import OptionsSource


async def request(url: str, options: OptionsSource = None, /, **kwargs: Any) -> HttpResponse:
    return await HttpCall().request(url, options, **kwargs)


async def get(url: str, options: OptionsSource = None, /, **kwargs: Any) -> Any:
    """GET ``url`` and return the decoded body.

    >>> await http_call.get("https://example.com/users/1")
    {'id': 1}
    """
    return await HttpCall().get(url, options, **kwargs)


async def post(url: str, options: OptionsSource = None, /, **kwargs: Any) -> Any:
    return await HttpCall().post(url, options, **kwargs)


async def stream(url: str, options: OptionsSource = None, /, **kwargs: Any) -> ResponseStreamPort:
    return await HttpCall().stream(url, options, **kwargs)
