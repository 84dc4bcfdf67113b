import logging

from http_call.api import get, post, request, stream
from http_call.application.dtos.http_response import HttpResponse
from http_call.client import HttpCall
from http_call.config import VERSION as __version__
from http_call.domain.descriptor import RequestDescriptor, resolve_url
from http_call.domain.errors import (
    HTTPError,
    HttpCallError,
    InvalidURL,
    MalformedResponse,
    StreamUnavailable,
    TransportError,
)
from http_call.domain.options import RequestOptions, merge_options

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "HttpCall",
    "HttpResponse",
    "RequestDescriptor",
    "RequestOptions",
    "merge_options",
    "resolve_url",
    "get",
    "post",
    "request",
    "stream",
    "HttpCallError",
    "HTTPError",
    "InvalidURL",
    "MalformedResponse",
    "StreamUnavailable",
    "TransportError",
    "__version__",
]
