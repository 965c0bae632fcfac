"""MCP resources for n8n workflows.

Resources are listed and read through the server's ``list_resources`` and
``read_resource`` handlers because the set of workflows is only known at
request time.
"""

from .workflow_resources import (
    JSON_MIME_TYPE,
    list_workflow_resources,
    parse_workflow_uri,
    read_workflow_resource,
    workflow_uri,
)

__all__ = [
    "JSON_MIME_TYPE",
    "list_workflow_resources",
    "parse_workflow_uri",
    "read_workflow_resource",
    "workflow_uri",
]
