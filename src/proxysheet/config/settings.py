"""
Configuration management for Proxy Sheet.

Uses Pydantic for type-safe, validated configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class ProxySheetSettings(BaseSettings):
    """Main configuration for Proxy Sheet.

    Settings can be overridden via:
    1. Environment variables (prefixed with PS_)
    2. .env file in project root
    3. Programmatic overrides

    Example:
        export PS_HTTP_TIMEOUT=10
        export PS_LOG_LEVEL=DEBUG
    """

    # === Card service ===
    api_base: str = Field(
        default="https://api.scryfall.com",
        description="Base URL of the Scryfall API",
    )
    user_agent: str = Field(
        default="ProxySheet/1.0",
        description="User-Agent header sent with every API request",
    )
    http_timeout: int = Field(
        default=30, ge=5, le=120, description="HTTP request timeout in seconds"
    )
    search_result_cap: int = Field(
        default=10,
        ge=1,
        le=175,
        description="Maximum cards kept from a broad search",
    )

    # === Display ===
    oracle_text_limit: int = Field(
        default=200, ge=20, le=2000, description="Oracle text characters per proxy"
    )
    oracle_text_separator: str = Field(
        default=" • ", description="Replacement for line breaks in oracle text"
    )
    error_display_seconds: int = Field(
        default=5, ge=1, le=60, description="Seconds before an error message hides"
    )

    # === Web UI ===
    web_host: str = Field(default="127.0.0.1", description="Web UI host")
    web_port: int = Field(
        default=5001, ge=1024, le=65535, description="Web UI port"
    )

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_rotation: str = Field(default="10 MB", description="Log file rotation size")
    log_retention: str = Field(
        default="10 days", description="Log file retention period"
    )
    log_to_file: bool = Field(default=False, description="Enable file logging")
    logs_dir: Path = Field(default=Path("logs"), description="Log files directory")

    @field_validator("api_base")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the API base so paths can be appended directly."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"api_base must be an http(s) URL, got {v!r}")
        return v.rstrip("/")

    model_config = {
        "env_prefix": "PS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Global settings instance
settings = ProxySheetSettings()


def reload_settings() -> ProxySheetSettings:
    """Reload settings from environment and .env file.

    Useful for testing or runtime configuration changes.
    """
    global settings
    settings = ProxySheetSettings()
    return settings
