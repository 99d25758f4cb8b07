"""
Keyword classifier deciding whether a text block looks like an HTTP message.
The recognized methods are loaded from a YAML rules file so pages with other
verbs can be supported without code changes.
"""

import re
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

from ..models import HTTP_METHODS
from ..utils.logger import get_logger


logger = get_logger(__name__)

DEFAULT_RULES_PATH = Path(__file__).parent.parent / "config" / "detection_rules.yaml"
DEFAULT_RESPONSE_PREFIX = "HTTP/"


class HTTPClassifier:
    """Detect HTTP content by searching for method keywords."""

    def __init__(
        self,
        methods: Iterable[str] = HTTP_METHODS,
        response_prefix: str = DEFAULT_RESPONSE_PREFIX,
    ):
        if isinstance(methods, str):
            raise ValueError("HTTP methods must be a list of strings")
        self.methods = tuple(methods)
        if not self.methods:
            raise ValueError("At least one HTTP method is required")
        # An empty keyword would match any text
        if not all(isinstance(m, str) and m for m in self.methods):
            raise ValueError("HTTP methods must be a list of non-empty strings")
        if not isinstance(response_prefix, str) or not response_prefix:
            raise ValueError("Response prefix must be a non-empty string")
        self.response_prefix = response_prefix
        self._pattern = re.compile('|'.join(re.escape(m) for m in self.methods))

    @classmethod
    def from_yaml(cls, rules_path: Optional[str] = None) -> "HTTPClassifier":
        """
        Build a classifier from a YAML rules file.

        Args:
            rules_path: Path to YAML rules file. If None, uses the packaged
                config/detection_rules.yaml
        """
        path = Path(rules_path) if rules_path else DEFAULT_RULES_PATH
        rules = cls._load_rules(path)
        logger.info(f"Loaded detection rules from {path}")
        return cls(
            methods=rules.get('methods') or HTTP_METHODS,
            response_prefix=rules.get('response_prefix') or DEFAULT_RESPONSE_PREFIX,
        )

    @staticmethod
    def _load_rules(path: Path) -> Dict[str, Any]:
        """Load rules from YAML file."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                rules = yaml.safe_load(f) or {}
        except Exception as e:
            logger.error(f"Failed to load rules from {path}: {e}")
            raise

        if not isinstance(rules, dict):
            raise ValueError(f"Rules file {path} must contain a mapping")
        methods = rules.get('methods')
        if methods is not None and not isinstance(methods, list):
            raise ValueError(f"Rules file {path}: methods must be a list of strings")
        logger.debug(f"Successfully loaded {len(rules)} rule sections")
        return rules

    def is_http(self, content: Any) -> bool:
        """Check if content contains any HTTP method keyword."""
        if not content or not isinstance(content, str):
            return False
        return self._pattern.search(content) is not None

    def is_response(self, content: Any) -> bool:
        """Check if content starts with an HTTP status line."""
        if not content or not isinstance(content, str):
            return False
        return content.strip().startswith(self.response_prefix)
