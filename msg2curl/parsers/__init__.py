"""Parsers for raw HTTP text."""

from .http_parser import HTTPParser, parse_message, parse_request_line
from .detection_rules import HTTPClassifier

__all__ = ["HTTPParser", "HTTPClassifier", "parse_message", "parse_request_line"]
