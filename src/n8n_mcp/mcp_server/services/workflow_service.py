"""Workflow service for MCP server.

Provides workflow search, retrieval and lifecycle operations.
Each method performs one n8n API round trip and returns text content.
"""

import logging
from typing import Optional

from n8n_mcp.client import N8nClient
from n8n_mcp.core.models import CreateWorkflowInput, UpdateWorkflowInput

from ..utils.errors import translate_api_errors
from .base_service import BaseService, log_service_call

logger = logging.getLogger(__name__)


class WorkflowService(BaseService):
    """Service for workflow management operations."""

    @classmethod
    @log_service_call
    @translate_api_errors
    def search_workflows(
        cls,
        client: N8nClient,
        query: Optional[str] = None,
        limit: Optional[int] = None,
        project_id: Optional[str] = None,
    ) -> str:
        """Search or list workflows and return JSON previews.

        A non-empty query filters the full list by name or tag name; the
        limit and project filters only apply to plain listing.

        Args:
            client: n8n API client
            query: Case-insensitive text to look for in names and tags
            limit: Maximum number of workflows to list
            project_id: Restrict the listing to one project

        Returns:
            JSON array of ``{id, name, active, tags, updatedAt}`` objects
        """
        if query:
            workflows = client.search_workflows(query)
        else:
            workflows = client.list_workflows(limit=limit, project_id=project_id)

        logger.info(f"Found {len(workflows)} workflows")
        return cls.format_json([workflow.preview() for workflow in workflows])

    @classmethod
    @log_service_call
    @translate_api_errors
    def get_workflow_details(cls, client: N8nClient, workflow_id: str) -> str:
        workflow = client.get_workflow(workflow_id)
        return cls.format_json(workflow.to_dict())

    @classmethod
    @log_service_call
    @translate_api_errors
    def create_workflow(cls, client: N8nClient, workflow: CreateWorkflowInput) -> str:
        created = client.create_workflow(workflow)
        logger.info(f"Created workflow {created.id} ({created.name})")
        return f"Workflow created successfully!\n\n{cls.format_json(created.to_dict())}"

    @classmethod
    @log_service_call
    @translate_api_errors
    def update_workflow(cls, client: N8nClient, workflow_id: str, updates: UpdateWorkflowInput) -> str:
        updated = client.update_workflow(workflow_id, updates)
        logger.info(f"Updated workflow {workflow_id}")
        return f"Workflow updated successfully!\n\n{cls.format_json(updated.to_dict())}"

    @classmethod
    @log_service_call
    @translate_api_errors
    def delete_workflow(cls, client: N8nClient, workflow_id: str) -> str:
        client.delete_workflow(workflow_id)
        logger.info(f"Deleted workflow {workflow_id}")
        return f"Workflow {workflow_id} deleted successfully!"

    @classmethod
    @log_service_call
    @translate_api_errors
    def activate_workflow(cls, client: N8nClient, workflow_id: str) -> str:
        workflow = client.activate_workflow(workflow_id)
        return f"Workflow {workflow_id} activated successfully!\n\n{cls.format_json(workflow.to_dict())}"

    @classmethod
    @log_service_call
    @translate_api_errors
    def deactivate_workflow(cls, client: N8nClient, workflow_id: str) -> str:
        workflow = client.deactivate_workflow(workflow_id)
        return f"Workflow {workflow_id} deactivated successfully!\n\n{cls.format_json(workflow.to_dict())}"
