"""HTTP client for the n8n public REST API."""

from .n8n_client import N8nClient

__all__ = ["N8nClient"]
