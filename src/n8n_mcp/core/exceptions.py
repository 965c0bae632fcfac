"""Custom exceptions for the n8n MCP server."""

from typing import Optional


class N8nMCPError(Exception):
    """Base exception for all n8n MCP errors."""

    pass


class ConfigurationError(N8nMCPError):
    """Raised when required configuration is missing or invalid."""

    pass


class N8nAPIError(N8nMCPError):
    """The n8n API answered with a non-2xx status.

    Keeps the raw HTTP error text as the exception message and, separately,
    the ``message`` field n8n puts in most error bodies.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, remote_message: Optional[str] = None):
        self.status_code = status_code
        self.remote_message = remote_message
        super().__init__(message)


class N8nNotFoundError(N8nAPIError):
    """Raised when the requested workflow or execution does not exist (HTTP 404)."""

    pass
