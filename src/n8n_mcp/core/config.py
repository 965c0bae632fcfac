"""Configuration for the n8n MCP server.

The server needs exactly two settings, read once at startup:

- ``N8N_API_URL``: base URL of the n8n public API (e.g. ``https://n8n.example.com/api/v1``)
- ``N8N_API_KEY``: API key sent in the ``X-N8N-API-KEY`` header
"""

import logging
import os
from collections.abc import Mapping
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

API_URL_ENV = "N8N_API_URL"
API_KEY_ENV = "N8N_API_KEY"


class N8nConfig(BaseModel):
    """Immutable connection settings for the n8n API."""

    model_config = ConfigDict(frozen=True)

    api_url: str = Field(description="Base URL of the n8n REST API")
    api_key: str = Field(description="Static API key for the X-N8N-API-KEY header", repr=False)

    @field_validator("api_url")
    @classmethod
    def normalize_api_url(cls, v: str) -> str:
        """Strip surrounding whitespace and trailing slashes."""
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("api_url must not be empty")
        return v

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Reject blank keys."""
        v = v.strip()
        if not v:
            raise ValueError("api_key must not be empty")
        return v


def load_config(environ: Optional[Mapping[str, str]] = None) -> N8nConfig:
    """Build the server configuration from environment variables.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        Frozen N8nConfig

    Raises:
        ConfigurationError: If either variable is unset or blank
    """
    env = os.environ if environ is None else environ

    api_url = env.get(API_URL_ENV, "").strip()
    api_key = env.get(API_KEY_ENV, "").strip()

    missing = [name for name, value in ((API_URL_ENV, api_url), (API_KEY_ENV, api_key)) if not value]
    if missing:
        raise ConfigurationError(
            f"{API_URL_ENV} and {API_KEY_ENV} must be set in environment variables "
            f"(missing: {', '.join(missing)})"
        )

    config = N8nConfig(api_url=api_url, api_key=api_key)
    logger.debug(f"Loaded n8n configuration for {config.api_url}")
    return config
