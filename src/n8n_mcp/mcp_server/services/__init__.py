"""Service layer for MCP server.

Stateless services that call the n8n client and render tool results
as text content.
"""

from .base_service import BaseService
from .execution_service import ExecutionService
from .workflow_service import WorkflowService

__all__ = [
    "BaseService",
    "ExecutionService",
    "WorkflowService",
]
