from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture()
def get_request() -> str:
    return (
        "GET /v1/users HTTP/1.1\n"
        "Host: api.example.com\n"
        "Authorization: Bearer xyz\n"
        "\n"
    )


@pytest.fixture()
def post_request() -> str:
    return (
        "POST /v1/items HTTP/1.1\n"
        "Host: api.example.com\n"
        "Content-Type: application/json\n"
        "Content-Length: 12\n"
        "\n"
        '{"a":"it\'s"}'
    )


@pytest.fixture()
def json_response() -> str:
    return (
        "HTTP/1.1 201 Created\n"
        "Content-Type: application/json\n"
        "\n"
        '{"id": 7}'
    )
