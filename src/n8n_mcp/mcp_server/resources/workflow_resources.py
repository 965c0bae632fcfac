"""Workflow resources exposed as ``n8n://workflow/<id>``.

Every workflow in the n8n instance becomes one read-only JSON resource.
Listing issues one unfiltered list call; reading issues one get call.
"""

import json
import logging
import re

from mcp.types import Resource, ResourceTemplate

from n8n_mcp.client import N8nClient

from ..utils.errors import invalid_request, translate_api_errors

logger = logging.getLogger(__name__)

WORKFLOW_URI_PREFIX = "n8n://workflow/"
WORKFLOW_URI_PATTERN = re.compile(r"^n8n://workflow/(.+)$")
JSON_MIME_TYPE = "application/json"

WORKFLOW_RESOURCE_TEMPLATE = ResourceTemplate(
    uriTemplate=f"{WORKFLOW_URI_PREFIX}{{workflow_id}}",
    name="n8n workflow",
    description="Full JSON definition of an n8n workflow by ID",
    mimeType=JSON_MIME_TYPE,
)


def workflow_uri(workflow_id: str | int) -> str:
    return f"{WORKFLOW_URI_PREFIX}{workflow_id}"


def parse_workflow_uri(uri: str) -> str:
    """Extract the workflow ID from a resource URI.

    Raises:
        McpError: INVALID_REQUEST if the URI is not ``n8n://workflow/<id>``
    """
    match = WORKFLOW_URI_PATTERN.match(uri)
    if not match:
        invalid_request(f"Invalid resource URI: {uri}")
    return match.group(1)


@translate_api_errors
def list_workflow_resources(client: N8nClient) -> list[Resource]:
    workflows = client.list_workflows()
    logger.debug(f"Listing {len(workflows)} workflow resources")
    return [
        Resource(
            uri=workflow_uri(workflow.id),
            name=workflow.name,
            description=f"Workflow: {workflow.name} ({'active' if workflow.active else 'inactive'})",
            mimeType=JSON_MIME_TYPE,
        )
        for workflow in workflows
    ]


def read_workflow_resource(client: N8nClient, uri: str) -> str:
    """Fetch the workflow behind ``uri`` and return it as pretty-printed JSON."""
    workflow_id = parse_workflow_uri(uri)
    return _fetch_workflow_json(client, workflow_id)


@translate_api_errors
def _fetch_workflow_json(client: N8nClient, workflow_id: str) -> str:
    workflow = client.get_workflow(workflow_id)
    return json.dumps(workflow.to_dict(), indent=2, ensure_ascii=False)
