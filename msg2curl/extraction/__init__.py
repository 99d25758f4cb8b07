"""Extraction of HTTP content from lists of text blocks."""

from .block_extractor import BlockExtractor

__all__ = ["BlockExtractor"]
