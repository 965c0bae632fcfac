"""Command-line interface for the n8n MCP server."""

from .main import cli

__all__ = ["cli"]
