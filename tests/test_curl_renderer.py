from __future__ import annotations

import shlex

import pytest

from msg2curl.errors import MissingHostHeader, RenderError
from msg2curl.parsers import HTTPParser
from msg2curl.renderers import CurlRenderer, escape_single_quotes, http_to_curl, render_curl


def _shell_args(command: str) -> list[str]:
    # Line continuations are plain whitespace to the shell
    return shlex.split(command.replace(" \\\n", " "))


def test_get_request_renders_headers(get_request: str) -> None:
    assert http_to_curl(get_request) == (
        "curl -X GET 'https://api.example.com/v1/users' \\\n"
        "  -H 'Authorization: Bearer xyz'"
    )


def test_post_request_escapes_single_quotes(post_request: str) -> None:
    command = http_to_curl(post_request)
    assert command == (
        "curl -X POST 'https://api.example.com/v1/items' \\\n"
        "  -H 'Content-Type: application/json' \\\n"
        "  -d '{\"a\":\"it'\\''s\"}'"
    )


def test_body_survives_shell_quoting() -> None:
    body = "it's a 'quoted' body with \"double\" quotes and $HOME\nsecond line"
    command = render_curl("POST", "/x", {"Host": "h"}, body)
    args = _shell_args(command)
    assert args[:4] == ["curl", "-X", "POST", "https://h/x"]
    assert args[args.index("-d") + 1] == body


@pytest.mark.parametrize("host_name", ["Host", "host", "HOST", "hOsT"])
def test_host_and_content_length_are_never_emitted(host_name: str) -> None:
    headers = {
        host_name: "example.com",
        "CONTENT-LENGTH": "42",
        "content-length": "42",
        "Accept": "*/*",
    }
    command = render_curl("PUT", "/items/1", headers, "x")
    assert "https://example.com/items/1" in command
    header_args = [line for line in command.split("\n") if "-H" in line]
    assert header_args == ["  -H 'Accept: */*' \\"]
    assert "ength" not in command


def test_header_order_follows_mapping() -> None:
    headers = {"Host": "h", "X-B": "2", "X-A": "1", "X-C": "3"}
    args = _shell_args(render_curl("GET", "/", headers))
    assert [a for i, a in enumerate(args) if i and args[i - 1] == "-H"] == [
        "X-B: 2",
        "X-A: 1",
        "X-C: 3",
    ]


def test_empty_body_is_not_sent() -> None:
    assert "-d" not in render_curl("DELETE", "/x", {"Host": "h"}, "")


def test_missing_host_raises() -> None:
    with pytest.raises(MissingHostHeader) as exc:
        render_curl("GET", "/v1/users", {"Accept": "*/*"})
    assert exc.value.path == "/v1/users"
    assert isinstance(exc.value, RenderError)


def test_empty_host_value_raises() -> None:
    with pytest.raises(MissingHostHeader):
        render_curl("GET", "/", {"Host": ""})


def test_http_to_curl_without_host_raises() -> None:
    with pytest.raises(MissingHostHeader):
        http_to_curl("GET /v1/users HTTP/1.1\nAuthorization: Bearer xyz")


def test_custom_scheme() -> None:
    renderer = CurlRenderer(scheme="http")
    command = renderer.render("GET", "/status", {"Host": "localhost:8080"})
    assert command == "curl -X GET 'http://localhost:8080/status'"


def test_render_request_matches_render(post_request: str) -> None:
    renderer = CurlRenderer()
    req = HTTPParser.parse_request(post_request)
    assert renderer.render_request(req) == renderer.render(
        req.method, req.path, req.headers, req.body
    )


def test_rendering_is_deterministic(post_request: str) -> None:
    assert http_to_curl(post_request) == http_to_curl(post_request)


def test_escape_single_quotes() -> None:
    assert escape_single_quotes("no quotes") == "no quotes"
    assert escape_single_quotes("a'b") == "a'\\''b"
