"""Helpers shared by MCP tools, resources and prompts."""
