"""Data models for parsed HTTP messages."""

from .http_models import (
    HTTP_METHODS,
    NO_BODY,
    ParsedMessage,
    ParsedRequest,
    RequestLine,
)

__all__ = [
    "HTTP_METHODS",
    "NO_BODY",
    "ParsedMessage",
    "ParsedRequest",
    "RequestLine",
]
