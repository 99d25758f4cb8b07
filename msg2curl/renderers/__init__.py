"""Command renderers for parsed HTTP requests."""

from .curl_renderer import CurlRenderer, escape_single_quotes, http_to_curl, render_curl

__all__ = ["CurlRenderer", "escape_single_quotes", "http_to_curl", "render_curl"]
