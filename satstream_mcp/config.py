"""
Configuration helpers for the Satstream MCP server.

This module centralizes base URL selection, API key loading and logging
options. No secrets are stored in the repository; the API key comes from the
environment or the first positional command-line argument.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from satstream_mcp.errors import StartupConfigError

# Default connection settings
DEFAULT_BASE_URL = os.getenv("SATSTREAM_BASE_URL", "https://api.satstream.io/api/v1")


def _load_timeout() -> Optional[float]:
    raw_timeout = os.getenv("SATSTREAM_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return None
    return None


DEFAULT_TIMEOUT = _load_timeout()

# API key handling
API_KEY_ENV_VAR = "SATSTREAM_API_KEY"

LOG_LEVEL = os.getenv("SATSTREAM_MCP_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("SATSTREAM_MCP_LOG_FORMAT", "json")  # json or plain


def load_api_key(cli_value: Optional[str] = None) -> Optional[str]:
    """
    Load the Satstream API key from the environment, falling back to a CLI value.

    Args:
        cli_value: The first positional command-line argument, if any.

    Returns:
        The API key string if available, otherwise None. The key is never logged
        or returned to callers.
    """
    env_key = os.getenv(API_KEY_ENV_VAR)
    if env_key and env_key.strip():
        return env_key.strip()
    if cli_value and cli_value.strip():
        return cli_value.strip()
    return None


@dataclass(frozen=True, slots=True)
class ApiCredential:
    """Immutable API credential passed explicitly to every upstream call."""

    value: str = field(repr=False)


@dataclass(slots=True)
class SatstreamConfig:
    """Runtime configuration for Satstream API access."""

    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = DEFAULT_TIMEOUT
    api_key: Optional[str] = load_api_key()
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT


def require_credential(config: SatstreamConfig) -> ApiCredential:
    """Return the configured credential or fail with ``StartupConfigError``."""
    if not config.api_key:
        raise StartupConfigError(
            f"{API_KEY_ENV_VAR} must be provided as an environment variable "
            "or as the first command-line argument."
        )
    return ApiCredential(config.api_key)


default_config = SatstreamConfig()
