"""Execution tools for the MCP server.

These tools run workflows and inspect or delete their executions.
"""

import asyncio
import logging
from typing import Annotated, Optional

from pydantic import Field

from n8n_mcp.core.models import ExecutionStatus, WorkflowInputs

from ..server import mcp
from ..services.execution_service import ExecutionService

logger = logging.getLogger(__name__)


@mcp.tool()
async def execute_workflow(
    workflow_id: Annotated[str, Field(description="The ID of the workflow to execute")],
    inputs: Annotated[
        Optional[WorkflowInputs],
        Field(description="Inputs to provide to the workflow. Exactly one of the chat, form or webhook shapes."),
    ] = None,
) -> str:
    """Execute a workflow by ID.

    ⚠️ Before executing always ensure you know the input schema by first using
    the get_workflow_details tool and consulting the workflow description.

    Input shapes (pick the one matching the workflow trigger):
        # Chat trigger
        inputs={"type": "chat", "chatInput": "Hello"}

        # Form trigger
        inputs={"type": "form", "formData": {"email": "a@b.c"}}

        # Webhook trigger
        inputs={"type": "webhook", "webhookData": {"method": "POST", "body": {"id": 1}}}

    Returns:
        Execution JSON
    """
    logger.debug(f"execute_workflow called for: {workflow_id} (inputs: {inputs.type if inputs else None})")
    client = mcp.client
    return await asyncio.to_thread(ExecutionService.execute_workflow, client, workflow_id, inputs)


@mcp.tool()
async def get_executions(
    workflow_id: Annotated[str, Field(description="The ID of the workflow")],
    limit: Annotated[int, Field(description="Maximum number of executions to return", gt=0)] = 20,
    status: Annotated[ExecutionStatus | None, Field(description="Filter by execution status")] = None,
) -> str:
    """Get execution history for a workflow."""
    logger.debug(f"get_executions called for: {workflow_id} (limit={limit}, status={status})")
    client = mcp.client
    return await asyncio.to_thread(ExecutionService.get_executions, client, workflow_id, limit, status)


@mcp.tool()
async def get_execution_details(
    execution_id: Annotated[str, Field(description="The ID of the execution")],
) -> str:
    """Get detailed information about a specific execution.

    Includes per-node run data and the error that stopped the run, if any.
    """
    logger.debug(f"get_execution_details called for: {execution_id}")
    client = mcp.client
    return await asyncio.to_thread(ExecutionService.get_execution_details, client, execution_id)


@mcp.tool()
async def delete_execution(
    execution_id: Annotated[str, Field(description="The ID of the execution to delete")],
) -> str:
    """Delete an execution record by ID."""
    logger.debug(f"delete_execution called for: {execution_id}")
    client = mcp.client
    return await asyncio.to_thread(ExecutionService.delete_execution, client, execution_id)
