"""MCP tools for n8n.

This module imports all tool modules to register them
with the FastMCP server instance via decorators.
"""

from . import (
    execution_tools,
    workflow_tools,
)

__all__ = [
    "execution_tools",
    "workflow_tools",
]
