"""Render parsed HTTP requests as curl commands."""

import logging
from typing import Dict, List

from ..errors import MissingHostHeader
from ..models import ParsedRequest
from ..parsers import HTTPParser

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "https"

# Host is already part of the URL and curl computes Content-Length itself
SKIPPED_HEADERS = frozenset({"host", "content-length"})

CONTINUATION = " \\\n  "


def escape_single_quotes(text: str) -> str:
    """Escape text for use inside a POSIX shell single-quoted string."""
    return text.replace("'", "'\\''")


class CurlRenderer:
    """Build a pasteable multi-line curl command from request parts."""

    def __init__(self, scheme: str = DEFAULT_SCHEME):
        self.scheme = scheme

    def render(
        self,
        method: str,
        path: str,
        headers: Dict[str, str],
        body: str = "",
    ) -> str:
        """
        Render a curl command for the given request.

        Args:
            method: HTTP method from the request line
            path: Request path, appended to the host as is
            headers: Header mapping in the order the headers were parsed
            body: Request body, sent with -d when non-empty

        Returns:
            Command with one continuation line per header and body

        Raises:
            MissingHostHeader: if no Host header is present
        """
        request = ParsedRequest(
            headers=headers, body=body, method=method, path=path
        )
        return self.render_request(request)

    def render_request(self, request: ParsedRequest) -> str:
        """Render an already parsed request."""
        try:
            url = request.url_for(self.scheme)
        except MissingHostHeader:
            logger.debug(f"No host header for {request.method} {request.path}")
            raise

        parts: List[str] = [f"curl -X {request.method} '{url}'"]

        for name, value in request.headers.items():
            if name.lower() in SKIPPED_HEADERS:
                continue
            parts.append(f"-H '{name}: {value}'")

        if request.body:
            parts.append(f"-d '{escape_single_quotes(request.body)}'")

        return CONTINUATION.join(parts)

    def http_to_curl(self, raw: str) -> str:
        """Parse a raw HTTP request and render it as a curl command."""
        return self.render_request(HTTPParser.parse_request(raw))


def render_curl(
    method: str, path: str, headers: Dict[str, str], body: str = ""
) -> str:
    """Render a curl command with the default https scheme."""
    return CurlRenderer().render(method, path, headers, body)


def http_to_curl(raw: str, scheme: str = DEFAULT_SCHEME) -> str:
    """Parse a raw HTTP request and render it as a curl command."""
    return CurlRenderer(scheme).http_to_curl(raw)
