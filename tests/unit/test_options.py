from __future__ import annotations

from http_call.config import settings
from http_call.domain.options import RequestOptions, default_options, merge_options


def test_headers_merge_field_by_field_later_source_wins():
    merged = merge_options(
        {"headers": {"X-A": "1"}},
        {"headers": {"X-B": "2"}},
        {"headers": {"X-A": "3"}},
    )
    assert merged.headers == {"X-A": "3", "X-B": "2"}


def test_scalar_keys_are_last_write_wins():
    merged = merge_options(
        {"method": "GET", "raw": True, "host": "a.example"},
        {"host": "b.example"},
        {"raw": False},
    )
    assert merged.method == "GET"
    assert merged.host == "b.example"
    assert merged.raw is False


def test_unset_dataclass_fields_do_not_override():
    merged = merge_options(RequestOptions(protocol="http", port=8080), RequestOptions(port=None))
    assert merged.protocol == "http"
    assert merged.port == 8080


def test_unknown_keys_pass_through_in_extra():
    merged = merge_options({"timeout": 3}, {"colour": "blue"}, {"timeout": 5})
    assert merged.extra == {"timeout": 5, "colour": "blue"}


def test_camel_case_middleware_aliases():
    hook = lambda r: r  # noqa: E731
    merged = merge_options({"requestMiddleware": hook, "responseMiddleware": hook})
    assert merged.request_middleware is hook
    assert merged.response_middleware is hook


def test_none_sources_are_skipped_and_inputs_untouched():
    instance = {"headers": {"X-A": "1"}}
    merged = merge_options(None, instance, None, {"headers": {"X-A": "2"}})
    assert merged.headers == {"X-A": "2"}
    assert instance == {"headers": {"X-A": "1"}}


def test_default_options_carry_user_agent():
    merged = merge_options(default_options(), {"headers": {"accept": "application/json"}})
    assert merged.headers == {"user-agent": settings.user_agent, "accept": "application/json"}
    assert settings.user_agent.startswith("http-call/")


def test_header_names_differing_only_in_case_collapse_to_latest():
    merged = merge_options(
        default_options(),
        {"headers": {"User-Agent": "instance/1", "Accept": "text/html"}},
        {"headers": {"user-agent": "call/1"}},
    )
    assert merged.headers == {"user-agent": "call/1", "Accept": "text/html"}
