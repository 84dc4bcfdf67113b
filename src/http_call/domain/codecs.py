from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from http_call.domain.errors import MalformedResponse

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


def encode_form(body: Mapping[str, Any] | None) -> str:
    """Serialize a field mapping as application/x-www-form-urlencoded.

    Sequence values repeat the key (``{"a": ["1", "2"]}`` -> ``a=1&a=2``).
    """
    return urlencode(dict(body or {}), doseq=True)


def decode_body(text: str, content_type: str | None, *, status_code: int | None = None) -> Any:
    if content_type != JSON_CONTENT_TYPE:
        return text
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedResponse(text, status_code=status_code, content_type=content_type) from e
