"""Prompt templates for n8n workflow work.

Three fixed prompts, each returning a single user message:

- ``create_simple_workflow``: guidance for designing a new workflow
- ``analyze_workflow``: embeds a workflow's JSON and asks for a review
- ``debug_workflow``: embeds an execution's JSON and asks for a diagnosis
"""

import json
import logging
from typing import Any, Callable, Optional

from mcp.types import GetPromptResult, Prompt, PromptArgument, PromptMessage, TextContent

from n8n_mcp.client import N8nClient

from ..utils.errors import invalid_params, method_not_found, translate_api_errors

logger = logging.getLogger(__name__)


PROMPTS: list[Prompt] = [
    Prompt(
        name="create_simple_workflow",
        description="Guide for creating a simple n8n workflow",
        arguments=[
            PromptArgument(
                name="workflow_type",
                description="Type of workflow (e.g., webhook, schedule, manual)",
                required=True,
            ),
        ],
    ),
    Prompt(
        name="analyze_workflow",
        description="Analyze an existing workflow and suggest improvements",
        arguments=[
            PromptArgument(name="workflow_id", description="ID of the workflow to analyze", required=True),
        ],
    ),
    Prompt(
        name="debug_workflow",
        description="Help debug a failing workflow execution",
        arguments=[
            PromptArgument(name="execution_id", description="ID of the failed execution", required=True),
        ],
    ),
]


def create_simple_workflow(client: N8nClient, workflow_type: str) -> str:
    return f"""I want to create a {workflow_type} workflow in n8n. Please help me:
1. Design the workflow structure with appropriate nodes
2. Configure the trigger ({workflow_type})
3. Add necessary processing nodes
4. Set up any required connections
5. Create the workflow using the create_workflow tool

Please ask me about the specific functionality I need before creating the workflow."""


@translate_api_errors
def analyze_workflow(client: N8nClient, workflow_id: str) -> str:
    workflow = client.get_workflow(workflow_id)
    return f"""Please analyze this n8n workflow and provide:
1. Overview of what the workflow does
2. Potential improvements or optimizations
3. Security considerations
4. Error handling assessment
5. Suggestions for better maintainability

Workflow details:
{json.dumps(workflow.to_dict(), indent=2, ensure_ascii=False)}"""


@translate_api_errors
def debug_workflow(client: N8nClient, execution_id: str) -> str:
    execution = client.get_execution(execution_id)
    return f"""Please help debug this failed n8n workflow execution:
1. Identify the node where the error occurred
2. Explain what went wrong
3. Suggest fixes
4. Recommend preventive measures

Execution details:
{json.dumps(execution.to_dict(), indent=2, ensure_ascii=False)}"""


_RENDERERS: dict[str, Callable[..., str]] = {
    "create_simple_workflow": create_simple_workflow,
    "analyze_workflow": analyze_workflow,
    "debug_workflow": debug_workflow,
}


def render_prompt(client: N8nClient, name: str, arguments: Optional[dict[str, Any]] = None) -> GetPromptResult:
    """Render a prompt by name.

    Args:
        client: n8n API client (used by prompts that embed live data)
        name: Prompt name from ``PROMPTS``
        arguments: Prompt arguments supplied by the host

    Returns:
        GetPromptResult with one user-role text message

    Raises:
        McpError: METHOD_NOT_FOUND for unknown prompts, INVALID_PARAMS when a
            required argument is missing, INTERNAL_ERROR when n8n fails
    """
    prompt = next((p for p in PROMPTS if p.name == name), None)
    if prompt is None:
        method_not_found(f"Unknown prompt: {name}")

    arguments = arguments or {}
    values: dict[str, Any] = {}
    for argument in prompt.arguments or []:
        value = arguments.get(argument.name)
        if argument.required and not value:
            invalid_params(f"{argument.name} is required")
        values[argument.name] = value

    logger.debug(f"Rendering prompt {name} with {values}")
    text = _RENDERERS[name](client, **values)

    return GetPromptResult(
        description=prompt.description,
        messages=[PromptMessage(role="user", content=TextContent(type="text", text=text))],
    )
