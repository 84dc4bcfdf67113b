from __future__ import annotations

import inspect
import logging
from typing import Any, Callable

from http_call.application.dtos.http_response import HttpResponse
from http_call.application.ports.transport_port import ResponseStreamPort, TransportPort
from http_call.domain.codecs import decode_body
from http_call.domain.descriptor import RequestDescriptor
from http_call.domain.errors import HTTPError
from http_call.domain.options import RequestOptions

logger = logging.getLogger(__name__)


async def _apply_hook(hook: Callable[[Any], Any] | None, value: Any) -> Any:
    if hook is None:
        return value
    result = hook(value)
    if inspect.isawaitable(result):
        result = await result
    return value if result is None else result


async def read_text(stream: ResponseStreamPort) -> str:
    """Buffer the whole body, chunks joined in arrival order."""
    chunks: list[str] = []
    try:
        async for chunk in stream.aiter_text():
            chunks.append(chunk)
    finally:
        await stream.aclose()
    return "".join(chunks)


class PerformRequestUseCase:
    """Runs one request through the pipeline.

    descriptor -> request hook -> transport -> buffer/decode (unless raw)
    -> response hook -> status check. Exactly one outcome per call: a
    response wrapper or a raised error.
    """

    def __init__(self, transport: TransportPort) -> None:
        self.transport = transport

    async def execute(self, url: str, options: RequestOptions) -> HttpResponse:
        request = RequestDescriptor.build(url, options)
        request = await _apply_hook(options.request_middleware, request)

        logger.debug("%s %s", request.method, request.url)
        stream = await self.transport.send(request)

        if request.raw and 200 <= stream.status_code < 300:
            response = HttpResponse(stream.status_code, stream.headers, request.url, stream=stream)
        else:
            text = await read_text(stream)
            body = decode_body(text, stream.headers.get("content-type"), status_code=stream.status_code)
            response = HttpResponse(stream.status_code, stream.headers, request.url, body=body)

        try:
            response = await _apply_hook(options.response_middleware, response)
        except Exception:
            await stream.aclose()
            raise

        if response.stream is not stream:
            await stream.aclose()

        logger.debug("%s %s -> %s", request.method, request.url, response.status_code)
        if not response.ok:
            if response.stream is not None:
                await response.stream.aclose()
            raise HTTPError.from_exchange(request, response)
        return response
