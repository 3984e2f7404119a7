"""
Resume Service Configuration Module

Centralized configuration management with Pydantic validation.
All environment variables are validated at startup to catch misconfigurations early.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

BROWSER_MODES = {"per_request", "shared"}


class ResumeSettings(BaseSettings):
    """
    Resume service configuration with validation.

    All settings can be overridden via environment variables
    (PORT, GITHUB_TOKEN, BROWSER_MODE, ...).
    """

    model_config = SettingsConfigDict(
        env_prefix="",  # No prefix, use exact env var names
        case_sensitive=False,
    )

    # === Server ===
    host: str = Field(default="0.0.0.0", description="Listen host")
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Listen port"
    )
    log_level: str = Field(default="INFO", description="Root log level")

    # === GitHub API ===
    github_token: Optional[str] = Field(
        default=None,
        description="Optional GitHub token for higher rate limits"
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        description="GitHub REST API base URL"
    )
    github_timeout_seconds: float = Field(
        default=10.0,
        ge=1,
        le=120,
        description="Timeout for each GitHub API call (1-120s)"
    )

    # === Playwright ===
    playwright_headless: bool = Field(default=True, description="Run Chromium headless")
    playwright_timeout: int = Field(
        default=30000,
        ge=1000,
        description="Page operation timeout in milliseconds"
    )
    browser_mode: str = Field(
        default="per_request",
        description="per_request: one browser per export; shared: one browser, one context per export"
    )

    @field_validator("github_token")
    @classmethod
    def blank_token_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty GITHUB_TOKEN as unset."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("github_api_url")
    @classmethod
    def validate_url_format(cls, v: str) -> str:
        """Basic URL format validation."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid URL format: {v}")
        return v.rstrip("/")

    @field_validator("browser_mode")
    @classmethod
    def validate_browser_mode(cls, v: str) -> str:
        v_lower = v.lower()
        if v_lower not in BROWSER_MODES:
            raise ValueError(f"browser_mode must be one of: {', '.join(sorted(BROWSER_MODES))}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return v_upper

    @property
    def has_github_token(self) -> bool:
        return self.github_token is not None


@lru_cache()
def get_settings() -> ResumeSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for performance.
    Use this function to access configuration throughout the app.
    """
    return ResumeSettings()


def validate_config_on_startup() -> ResumeSettings:
    """
    Validate configuration at application startup.

    Raises ValueError with details if config is invalid.
    A missing GitHub token is logged but not fatal.
    """
    try:
        settings = get_settings()
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}")

    logging.getLogger().setLevel(settings.log_level)

    # Log loaded configuration (never the token itself)
    logger.info(f"Configuration loaded: port={settings.port}")
    logger.info(f"  github_api_url={settings.github_api_url}")
    logger.info(f"  browser_mode={settings.browser_mode}")
    if settings.has_github_token:
        logger.info("GitHub token detected (higher rate limits)")
    else:
        logger.warning("No GitHub token configured (rate limits may apply)")

    return settings
