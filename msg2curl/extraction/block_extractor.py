"""
Search an ordered list of text blocks for an HTTP exchange.
Blocks are the rendered code fragments of a documentation page in document
order: the request block, usually followed by the response and sometimes by
a separate JSON payload.
"""

import json
from typing import Optional, Sequence

from ..errors import Msg2CurlError
from ..parsers import HTTPClassifier, HTTPParser
from ..renderers import CurlRenderer
from ..utils.logger import get_logger


logger = get_logger(__name__)


class BlockExtractor:
    """Find request/response blocks and pull commands or bodies out of them."""

    def __init__(
        self,
        classifier: Optional[HTTPClassifier] = None,
        renderer: Optional[CurlRenderer] = None,
    ):
        """
        Initialize block extractor.

        Args:
            classifier: Decides which blocks are HTTP requests
            renderer: Renders request blocks as curl commands
        """
        self.classifier = classifier or HTTPClassifier()
        self.renderer = renderer or CurlRenderer()

    def find_request_index(self, blocks: Sequence[str]) -> Optional[int]:
        """Index of the first block that looks like an HTTP request."""
        for idx, content in enumerate(blocks):
            if self.classifier.is_http(content):
                return idx
        return None

    def first_curl(self, blocks: Sequence[str]) -> Optional[str]:
        """Curl command for the first HTTP block that converts cleanly."""
        for idx, content in enumerate(blocks):
            if not self.classifier.is_http(content):
                continue
            try:
                return self.renderer.http_to_curl(content)
            except Msg2CurlError as e:
                logger.warning(f"Skipping block {idx}: {e}")
        return None

    def request_body(self, blocks: Sequence[str]) -> str:
        """Body of the first HTTP request block."""
        idx = self.find_request_index(blocks)
        if idx is None:
            return ''
        return HTTPParser.parse_message(blocks[idx]).body

    def response_body(self, blocks: Sequence[str]) -> str:
        """
        Body of the response following the request block.

        The block right after the request is used when it is an HTTP
        response with a body; otherwise a JSON-looking block one further
        down is returned as is.
        """
        idx = self.find_request_index(blocks)
        if idx is None:
            return ''

        if idx + 1 < len(blocks):
            content = blocks[idx + 1]
            if self.classifier.is_response(content):
                body = HTTPParser.parse_message(content).body
                if body:
                    return body

        if idx + 2 < len(blocks):
            content = blocks[idx + 2]
            content = content.strip() if isinstance(content, str) else ''
            if content.startswith('{') or content.startswith('['):
                try:
                    json.loads(content)
                except json.JSONDecodeError:
                    logger.debug(f"Block {idx + 2} is not valid JSON")
                return content

        return ''
