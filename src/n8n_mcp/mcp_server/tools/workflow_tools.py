"""Workflow management tools for the MCP server.

These tools search, inspect, create, update, activate and delete
workflows on the n8n instance.
"""

import asyncio
import logging
from typing import Annotated, Any

from pydantic import Field

from n8n_mcp.core.models import CreateWorkflowInput, UpdateWorkflowInput, WorkflowNode

from ..server import mcp
from ..services.workflow_service import WorkflowService

logger = logging.getLogger(__name__)


@mcp.tool()
async def search_workflows(
    query: Annotated[str | None, Field(description="Filter by name or tag name (case-insensitive)")] = None,
    limit: Annotated[
        Annotated[int, Field(gt=0, le=200)] | None,
        Field(description="Limit the number of results (max 200)"),
    ] = None,
    project_id: Annotated[str | None, Field(description="Only list workflows of this project")] = None,
) -> str:
    """Search for workflows with optional filters. Returns a preview of each workflow.

    Filter behavior:
    - No query: Lists workflows (honours limit and project_id)
    - Query: Matches workflow name OR any tag name, case-insensitive

    Examples:
        # List the first 50 workflows
        limit=50

        # Find everything tagged or named "slack"
        query="slack"

    Returns:
        JSON array of {id, name, active, tags, updatedAt}
    """
    logger.debug(f"search_workflows called with query={query!r} limit={limit}")
    client = mcp.client
    return await asyncio.to_thread(WorkflowService.search_workflows, client, query, limit, project_id)


@mcp.tool()
async def get_workflow_details(
    workflow_id: Annotated[str, Field(description="The ID of the workflow to retrieve")],
) -> str:
    """Get detailed information about a specific workflow including trigger details.

    Returns the full workflow definition: nodes, connections, settings and tags.
    """
    logger.debug(f"get_workflow_details called for: {workflow_id}")
    client = mcp.client
    return await asyncio.to_thread(WorkflowService.get_workflow_details, client, workflow_id)


@mcp.tool()
async def create_workflow(
    name: Annotated[str, Field(description="Name of the workflow", min_length=1)],
    nodes: Annotated[
        list[WorkflowNode],
        Field(description="Array of workflow nodes; each needs name, type and a two-number position"),
    ],
    connections: Annotated[dict[str, Any] | None, Field(description="Node connections configuration")] = None,
    active: Annotated[bool | None, Field(description="Whether the workflow should be active (default false)")] = None,
    settings: Annotated[dict[str, Any] | None, Field(description="Workflow settings")] = None,
    tags: Annotated[list[str] | None, Field(description="Tag IDs to attach to the workflow")] = None,
) -> str:
    """Create a new workflow in n8n.

    Example:
        name="Hello webhook"
        nodes=[{
            "name": "Webhook",
            "type": "n8n-nodes-base.webhook",
            "typeVersion": 2,
            "position": [250, 300],
            "parameters": {"path": "hello"}
        }]

    Returns:
        Confirmation followed by the created workflow JSON
    """
    logger.debug(f"create_workflow called: name={name!r}, {len(nodes)} nodes")
    fields = {
        "name": name,
        "nodes": nodes,
        "connections": connections,
        "active": active,
        "settings": settings,
        "tags": tags,
    }
    workflow = CreateWorkflowInput(**{key: value for key, value in fields.items() if value is not None})
    client = mcp.client
    return await asyncio.to_thread(WorkflowService.create_workflow, client, workflow)


@mcp.tool()
async def update_workflow(
    workflow_id: Annotated[str, Field(description="The ID of the workflow to update")],
    name: Annotated[Annotated[str, Field(min_length=1)] | None, Field(description="New name for the workflow")] = None,
    nodes: Annotated[list[WorkflowNode] | None, Field(description="Updated array of workflow nodes")] = None,
    connections: Annotated[dict[str, Any] | None, Field(description="Updated node connections")] = None,
    active: Annotated[bool | None, Field(description="Whether the workflow should be active")] = None,
    settings: Annotated[dict[str, Any] | None, Field(description="Updated workflow settings")] = None,
    tags: Annotated[list[str] | None, Field(description="Updated tag IDs")] = None,
) -> str:
    """Update an existing workflow.

    Only the fields you pass are changed; everything else is left as is.

    Returns:
        Confirmation followed by the updated workflow JSON
    """
    logger.debug(f"update_workflow called for: {workflow_id}")
    fields = {
        "name": name,
        "nodes": nodes,
        "connections": connections,
        "active": active,
        "settings": settings,
        "tags": tags,
    }
    updates = UpdateWorkflowInput(**{key: value for key, value in fields.items() if value is not None})
    client = mcp.client
    return await asyncio.to_thread(WorkflowService.update_workflow, client, workflow_id, updates)


@mcp.tool()
async def delete_workflow(
    workflow_id: Annotated[str, Field(description="The ID of the workflow to delete")],
) -> str:
    """Delete a workflow by ID."""
    logger.debug(f"delete_workflow called for: {workflow_id}")
    client = mcp.client
    return await asyncio.to_thread(WorkflowService.delete_workflow, client, workflow_id)


@mcp.tool()
async def activate_workflow(
    workflow_id: Annotated[str, Field(description="The ID of the workflow to activate")],
) -> str:
    """Activate a workflow so its triggers start listening."""
    logger.debug(f"activate_workflow called for: {workflow_id}")
    client = mcp.client
    return await asyncio.to_thread(WorkflowService.activate_workflow, client, workflow_id)


@mcp.tool()
async def deactivate_workflow(
    workflow_id: Annotated[str, Field(description="The ID of the workflow to deactivate")],
) -> str:
    """Deactivate a workflow so its triggers stop firing."""
    logger.debug(f"deactivate_workflow called for: {workflow_id}")
    client = mcp.client
    return await asyncio.to_thread(WorkflowService.deactivate_workflow, client, workflow_id)
