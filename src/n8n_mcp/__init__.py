"""n8n MCP server: the n8n REST API as MCP tools, resources and prompts."""

__version__ = "1.0.0"
