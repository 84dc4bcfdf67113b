from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from http_call.application.dtos.http_response import HttpResponse
from http_call.application.ports.transport_port import ResponseStreamPort, TransportPort
from http_call.application.use_cases.perform_request import PerformRequestUseCase
from http_call.domain.errors import StreamUnavailable
from http_call.domain.options import OptionsSource, RequestOptions, default_options, merge_options
from http_call.infrastructure.adapters.http.httpx_transport import HttpxTransport


class HttpCall:
    """Async HTTP convenience client.

    Options given here apply to every call made through the instance;
    per-call options (a mapping, keywords, or both) take precedence, and
    header maps are merged name by name::

        api = HttpCall(headers={"authorization": "Bearer t"})
        user = await api.get("https://example.com/users/1")
        user = await api.get("https://example.com/users/1", {"headers": {"accept": "application/json"}})
    """

    def __init__(
        self,
        options: OptionsSource = None,
        *,
        transport: TransportPort | None = None,
        **kwargs: Any,
    ) -> None:
        self.options = merge_options(options, kwargs)
        self.transport = transport or HttpxTransport()
        self._perform = PerformRequestUseCase(self.transport)

    def merged(
        self,
        call_options: OptionsSource = None,
        call_kwargs: Mapping[str, Any] | None = None,
        **forced: Any,
    ) -> RequestOptions:
        """Effective options for one call: defaults, instance, call mapping, call keywords, then forced values."""
        return merge_options(default_options(), self.options, call_options, call_kwargs, forced)

    async def request(self, url: str, options: OptionsSource = None, /, **kwargs: Any) -> HttpResponse:
        return await self._perform.execute(url, self.merged(options, kwargs))

    async def get(self, url: str, options: OptionsSource = None, /, **kwargs: Any) -> Any:
        response = await self._perform.execute(url, self.merged(options, kwargs, method="GET"))
        return response.body

    async def post(self, url: str, options: OptionsSource = None, /, **kwargs: Any) -> Any:
        """POST ``body`` (a field mapping) form-encoded; returns the decoded response body."""
        response = await self._perform.execute(url, self.merged(options, kwargs, method="POST"))
        return response.body

    async def stream(self, url: str, options: OptionsSource = None, /, **kwargs: Any) -> ResponseStreamPort:
        """GET in raw mode. The caller consumes and closes the returned stream."""
        response = await self._perform.execute(url, self.merged(options, kwargs, method="GET", raw=True))
        if response.stream is None:
            raise StreamUnavailable(response.url)
        return response.stream

    def __repr__(self) -> str:
        return f"<HttpCall headers={sorted(self.options.headers)}>"
