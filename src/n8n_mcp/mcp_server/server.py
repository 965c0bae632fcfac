"""FastMCP server instance for the n8n API.

Tools register with the module-level ``mcp`` instance via decorators.
Resources and prompts are served by overriding the FastMCP handlers: the
resource list depends on the workflows that exist in n8n at request time,
and prompt and unknown-name failures must carry specific MCP error codes.
The tools/call handler is replaced for the same reason.
"""

import asyncio
import json
import logging
from collections.abc import Iterable
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.shared.exceptions import McpError
from mcp.types import (
    CallToolRequest,
    CallToolResult,
    GetPromptResult,
    Prompt,
    Resource,
    ResourceTemplate,
    ServerResult,
    TextContent,
)
from pydantic import AnyUrl

from n8n_mcp.client import N8nClient

from .prompts import PROMPTS, render_prompt
from .resources import JSON_MIME_TYPE, list_workflow_resources, read_workflow_resource
from .resources.workflow_resources import WORKFLOW_RESOURCE_TEMPLATE
from .utils.errors import method_not_found

logger = logging.getLogger(__name__)


class N8nMCPServer(FastMCP):
    """FastMCP server bound to a single n8n API client."""

    def __init__(self, name: str, instructions: Optional[str] = None):
        super().__init__(name, instructions=instructions)
        self._n8n_client: Optional[N8nClient] = None
        self._mcp_server.request_handlers[CallToolRequest] = self._handle_call_tool

    def attach_client(self, client: N8nClient) -> None:
        """Bind the n8n client used by every tool, resource and prompt."""
        self._n8n_client = client
        logger.debug(f"Attached n8n client for {client.config.api_url}")

    def detach_client(self) -> None:
        self._n8n_client = None

    @property
    def client(self) -> N8nClient:
        if self._n8n_client is None:
            raise RuntimeError("n8n client is not configured; call attach_client() before serving requests")
        return self._n8n_client

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> Any:
        """Reject unknown tool names with METHOD_NOT_FOUND before dispatching."""
        tool_names = {tool.name for tool in await self.list_tools()}
        if name not in tool_names:
            logger.warning(f"Unknown tool requested: {name}")
            method_not_found(f"Unknown tool: {name}")
        return await super().call_tool(name, arguments)

    async def _handle_call_tool(self, req: CallToolRequest) -> ServerResult:
        """Serve tools/call so protocol errors keep their MCP error code.

        FastMCP reports every tool exception as an isError result. An McpError
        raised by a service or for an unknown tool name is re-raised instead,
        and the session answers with a JSON-RPC error carrying its code and
        message. Argument validation failures stay isError results.
        """
        name = req.params.name
        try:
            results = await self.call_tool(name, req.params.arguments or {})
        except ToolError as e:
            if isinstance(e.__cause__, McpError):
                logger.warning(f"Tool {name} failed: {e.__cause__.error.message}")
                raise e.__cause__
            logger.warning(f"Tool {name} rejected: {e}")
            return ServerResult(CallToolResult(content=[TextContent(type="text", text=str(e))], isError=True))

        structured = None
        if isinstance(results, tuple):
            content, structured = results
        elif isinstance(results, dict):
            content, structured = [TextContent(type="text", text=json.dumps(results, indent=2))], results
        else:
            content = list(results)
        return ServerResult(CallToolResult(content=list(content), structuredContent=structured, isError=False))

    async def list_resources(self) -> list[Resource]:
        return await asyncio.to_thread(list_workflow_resources, self.client)

    async def list_resource_templates(self) -> list[ResourceTemplate]:
        return [WORKFLOW_RESOURCE_TEMPLATE]

    async def read_resource(self, uri: AnyUrl | str) -> Iterable[ReadResourceContents]:
        text = await asyncio.to_thread(read_workflow_resource, self.client, str(uri))
        logger.info(f"Read resource {uri}")
        return [ReadResourceContents(content=text, mime_type=JSON_MIME_TYPE)]

    async def list_prompts(self) -> list[Prompt]:
        return list(PROMPTS)

    async def get_prompt(self, name: str, arguments: Optional[dict[str, Any]] = None) -> GetPromptResult:
        return await asyncio.to_thread(render_prompt, self.client, name, arguments)


mcp = N8nMCPServer(
    "mcp-n8n-api",
    instructions="""Tools for managing workflows on an n8n instance.

- search_workflows → find workflows by name or tag
- get_workflow_details → inspect nodes, connections and trigger setup
  (ALWAYS do this before execute_workflow to learn the expected inputs)
- execute_workflow → run a workflow with chat, form or webhook inputs
- get_executions / get_execution_details → inspect runs and failures

Each workflow is also readable as the resource n8n://workflow/<id>.""",
)


def register_tools() -> None:
    """Import all tool modules to register them with the server.

    Called during server startup so every tool is registered before the
    server starts handling requests.
    """
    from .tools import execution_tools, workflow_tools

    # Explicitly reference the modules to satisfy ruff F401
    _ = (execution_tools, workflow_tools)


__all__ = ["N8nMCPServer", "mcp", "register_tools"]
