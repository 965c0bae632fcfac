"""Execution service for MCP server.

Triggers workflow runs and reads or deletes execution records.
"""

import logging
from typing import Optional

from n8n_mcp.client import N8nClient
from n8n_mcp.core.models import ChatInputs, FormInputs, WebhookInputs

from ..utils.errors import translate_api_errors
from .base_service import BaseService, log_service_call

logger = logging.getLogger(__name__)


class ExecutionService(BaseService):
    """Service for workflow execution operations."""

    @classmethod
    @log_service_call
    @translate_api_errors
    def execute_workflow(
        cls,
        client: N8nClient,
        workflow_id: str,
        inputs: Optional[ChatInputs | FormInputs | WebhookInputs] = None,
    ) -> str:
        """Run a workflow and return the resulting execution as JSON.

        Args:
            client: n8n API client
            workflow_id: Workflow to run
            inputs: Already-validated chat, form or webhook payload

        Returns:
            Execution JSON
        """
        payload = inputs.to_dict() if inputs is not None else None
        execution = client.execute_workflow(workflow_id, payload)
        logger.info(f"Workflow {workflow_id} started execution {execution.id} (status: {execution.status})")
        return cls.format_json(execution.to_dict())

    @classmethod
    @log_service_call
    @translate_api_errors
    def get_executions(
        cls,
        client: N8nClient,
        workflow_id: str,
        limit: Optional[int] = None,
        status: Optional[str] = None,
    ) -> str:
        executions = client.get_executions(workflow_id, limit=limit, status=status)
        logger.info(f"Found {len(executions)} executions for workflow {workflow_id}")
        return cls.format_json([execution.to_dict() for execution in executions])

    @classmethod
    @log_service_call
    @translate_api_errors
    def get_execution_details(cls, client: N8nClient, execution_id: str) -> str:
        execution = client.get_execution(execution_id)
        return cls.format_json(execution.to_dict())

    @classmethod
    @log_service_call
    @translate_api_errors
    def delete_execution(cls, client: N8nClient, execution_id: str) -> str:
        client.delete_execution(execution_id)
        logger.info(f"Deleted execution {execution_id}")
        return f"Execution {execution_id} deleted successfully!"
