"""Core n8n MCP modules: configuration, domain models and exceptions."""

from .config import N8nConfig, load_config
from .exceptions import ConfigurationError, N8nAPIError, N8nMCPError, N8nNotFoundError
from .models import (
    ChatInputs,
    CreateWorkflowInput,
    Execution,
    FormInputs,
    UpdateWorkflowInput,
    WebhookData,
    WebhookInputs,
    Workflow,
    WorkflowInputs,
    WorkflowNode,
    WorkflowTag,
)

__all__ = [
    "ChatInputs",
    "ConfigurationError",
    "CreateWorkflowInput",
    "Execution",
    "FormInputs",
    "N8nAPIError",
    "N8nConfig",
    "N8nMCPError",
    "N8nNotFoundError",
    "UpdateWorkflowInput",
    "WebhookData",
    "WebhookInputs",
    "Workflow",
    "WorkflowInputs",
    "WorkflowNode",
    "WorkflowTag",
    "load_config",
]
