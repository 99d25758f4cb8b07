"""Application settings and configuration."""

import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
load_dotenv(env_path)


@dataclass
class Settings:
    """Application configuration settings."""

    # Server settings
    server_host: str = "0.0.0.0"
    server_port: int = 5000

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    # Rendering settings
    url_scheme: str = "https"

    # Detection rules; None uses the packaged config/detection_rules.yaml
    rules_file_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            server_host=os.getenv("SERVER_HOST", "0.0.0.0"),
            server_port=int(os.getenv("SERVER_PORT", "5000")),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            url_scheme=os.getenv("URL_SCHEME", "https"),
            rules_file_path=os.getenv("RULES_FILE_PATH") or None,
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
