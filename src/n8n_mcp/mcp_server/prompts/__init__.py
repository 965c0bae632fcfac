"""MCP prompt templates for building, analyzing and debugging n8n workflows."""

from .workflow_prompts import PROMPTS, render_prompt

__all__ = ["PROMPTS", "render_prompt"]
