"""Central configuration for datadog_monitors."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.datadoghq.com/api"
DEFAULT_TIMEOUT_S = 12.0


@dataclass
class Settings:
    """Configuration settings for datadog_monitors.

    All settings are loaded from environment variables with sensible defaults.
    """

    DATADOG_API_KEY: str | None
    DATADOG_APP_KEY: str | None
    DATADOG_API_URL: str
    DATADOG_TIMEOUT_S: float


def _read_settings() -> Settings:
    """Read all configuration from environment variables.

    Returns:
        Settings object with all configuration values.

    Note:
        An invalid timeout falls back to the default.
    """
    api_key = os.environ.get("DATADOG_API_KEY") or None
    app_key = os.environ.get("DATADOG_APP_KEY") or None
    api_url = (os.environ.get("DATADOG_API_URL") or DEFAULT_API_URL).rstrip("/")
    try:
        timeout = float(os.environ.get("DATADOG_TIMEOUT_S", "12") or "12")
    except ValueError:
        timeout = DEFAULT_TIMEOUT_S

    return Settings(
        DATADOG_API_KEY=api_key,
        DATADOG_APP_KEY=app_key,
        DATADOG_API_URL=api_url,
        DATADOG_TIMEOUT_S=timeout,
    )


settings = _read_settings()


def validate_settings() -> None:
    """Log warnings for missing credentials."""
    if settings.DATADOG_API_KEY is None:
        logger.warning("DATADOG_API_KEY is not set; API calls will fail.")
    if settings.DATADOG_APP_KEY is None:
        logger.warning("DATADOG_APP_KEY is not set; monitor endpoints will reject requests.")


validate_settings()
