"""Parser for raw HTTP messages copied out of rendered pages."""

import logging
from typing import Dict, List

from ..errors import MalformedRequestLine
from ..models import NO_BODY, ParsedMessage, ParsedRequest, RequestLine

logger = logging.getLogger(__name__)


class HTTPParser:
    """Parse raw HTTP request and response strings.

    Input is scraped text rather than a wire stream, so everything except the
    request line is parsed leniently: lines without a colon are dropped and a
    missing blank line simply means there is no body.
    """

    @staticmethod
    def _split_lines(raw: str) -> List[str]:
        return raw.strip().split('\n')

    @staticmethod
    def parse_message(raw: str) -> ParsedMessage:
        """Parse headers and body of a raw HTTP request or response."""
        lines = HTTPParser._split_lines(raw)

        # Line 0 is the request/status line
        headers: Dict[str, str] = {}
        body_start = NO_BODY
        for i, line in enumerate(lines[1:], 1):
            line = line.strip()
            if not line:
                body_start = i + 1
                break
            if ':' not in line:
                continue
            key, value = line.split(':', 1)
            key = key.strip()
            if not key:
                continue
            headers[key] = value.strip()

        body = (
            '\n'.join(lines[body_start:]).strip()
            if body_start != NO_BODY
            else ''
        )
        logger.debug(
            f"Parsed {len(headers)} headers, body starts at line {body_start}"
        )

        return ParsedMessage(
            headers=headers, body=body, body_start_line=body_start
        )

    @staticmethod
    def parse_request_line(raw: str) -> RequestLine:
        """Parse method and path from the first line of a raw request.

        Raises:
            MalformedRequestLine: if the line has no method or no path
        """
        request_line = HTTPParser._split_lines(raw)[0].strip()
        parts = request_line.split(' ')
        method = parts[0]
        path = parts[1] if len(parts) > 1 else ''
        if not method or not path:
            raise MalformedRequestLine(request_line)

        return RequestLine(method=method, path=path)

    @staticmethod
    def parse_request(raw: str) -> ParsedRequest:
        """Parse a raw HTTP request into request line, headers and body."""
        request_line = HTTPParser.parse_request_line(raw)
        message = HTTPParser.parse_message(raw)
        return ParsedRequest(
            headers=message.headers,
            body=message.body,
            body_start_line=message.body_start_line,
            method=request_line.method,
            path=request_line.path,
        )


def parse_message(raw: str) -> ParsedMessage:
    """Parse headers and body of a raw HTTP message."""
    return HTTPParser.parse_message(raw)


def parse_request_line(raw: str) -> RequestLine:
    """Parse method and path from the first line of a raw request."""
    return HTTPParser.parse_request_line(raw)
