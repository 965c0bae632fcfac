"""n8n MCP Server.

Exposes the n8n REST API as MCP tools, resources and prompts
for AI agents to use programmatically.
"""

from .main import run_server

__all__ = ["run_server"]
