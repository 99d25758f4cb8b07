"""Convert raw HTTP messages copied from documentation into curl commands."""

from .errors import MalformedRequestLine, MissingHostHeader, Msg2CurlError, RenderError
from .models import NO_BODY, ParsedMessage, ParsedRequest, RequestLine
from .parsers import HTTPClassifier, HTTPParser, parse_message, parse_request_line
from .renderers import CurlRenderer, http_to_curl, render_curl

__all__ = [
    "MalformedRequestLine",
    "MissingHostHeader",
    "Msg2CurlError",
    "RenderError",
    "NO_BODY",
    "ParsedMessage",
    "ParsedRequest",
    "RequestLine",
    "HTTPClassifier",
    "HTTPParser",
    "parse_message",
    "parse_request_line",
    "CurlRenderer",
    "http_to_curl",
    "render_curl",
]
