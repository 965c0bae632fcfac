"""Root-level test configuration and fixtures."""

import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests

from n8n_mcp.client import N8nClient
from n8n_mcp.core.config import N8nConfig

API_URL = "https://n8n.example.com/api/v1"
API_KEY = "test-api-key"
REASONS = {200: "OK", 204: "No Content", 401: "Unauthorized", 404: "Not Found", 500: "Internal Server Error"}


def build_response(
    status_code: int = 200,
    body: Any = None,
    url: str = f"{API_URL}/workflows",
    reason: Optional[str] = None,
) -> requests.Response:
    """Build a real requests.Response so raise_for_status()/json() behave as in production."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.reason = reason or REASONS.get(status_code, "Error")
    if body is None:
        response._content = b""
    else:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture
def make_response():
    """Factory fixture for fake HTTP responses."""
    return build_response


@pytest.fixture
def config():
    return N8nConfig(api_url=API_URL, api_key=API_KEY)


@pytest.fixture
def session():
    """requests.Session whose request() is a mock returning an empty 200 envelope."""
    mock_session = MagicMock(spec=requests.Session)
    mock_session.headers = {}
    mock_session.request.return_value = build_response(200, {"data": []})
    return mock_session


@pytest.fixture
def client(config, session):
    return N8nClient(config, session=session)


@pytest.fixture
def sample_workflow() -> dict[str, Any]:
    """A workflow as the n8n API returns it, including fields the models do not declare."""
    return {
        "id": "wf-1",
        "name": "Slack Notifier",
        "active": True,
        "createdAt": "2024-01-01T00:00:00.000Z",
        "updatedAt": "2024-01-02T00:00:00.000Z",
        "versionId": "v-1",
        "tags": [{"id": "t-1", "name": "Alerts"}],
        "nodes": [
            {
                "id": "n-1",
                "name": "Webhook",
                "type": "n8n-nodes-base.webhook",
                "typeVersion": 2,
                "position": [250, 300],
                "parameters": {"path": "notify"},
                "webhookId": "abc",
            }
        ],
        "connections": {"Webhook": {"main": [[{"node": "Slack", "type": "main", "index": 0}]]}},
        "settings": {"executionOrder": "v1"},
        "staticData": None,
        "pinData": {},
    }


@pytest.fixture
def sample_workflows(sample_workflow) -> list[dict[str, Any]]:
    return [
        sample_workflow,
        {
            "id": "wf-2",
            "name": "GitHub PR Analyzer",
            "active": False,
            "createdAt": "2024-01-03T00:00:00.000Z",
            "updatedAt": "2024-01-04T00:00:00.000Z",
            "tags": [{"id": "t-2", "name": "engineering"}],
        },
        {
            "id": "wf-3",
            "name": "Daily Report",
            "active": True,
            "createdAt": "2024-01-05T00:00:00.000Z",
            "updatedAt": "2024-01-06T00:00:00.000Z",
        },
    ]


@pytest.fixture
def sample_execution() -> dict[str, Any]:
    return {
        "id": 1001,
        "finished": False,
        "mode": "webhook",
        "startedAt": "2024-01-07T10:00:00.000Z",
        "stoppedAt": "2024-01-07T10:00:01.000Z",
        "workflowId": "wf-1",
        "status": "error",
        "data": {
            "resultData": {
                "runData": {"Webhook": [{"startTime": 1704621600000}]},
                "error": {"message": "Slack credentials are invalid", "node": {"name": "Slack"}},
            }
        },
    }


@pytest.fixture
def mock_client(config):
    """Mock N8nClient with the real method signatures."""
    mock = MagicMock(spec=N8nClient)
    mock.config = config
    return mock


@pytest.fixture
def attached_client(mock_client):
    """Attach a mock client to the shared server instance for the duration of a test."""
    from n8n_mcp.mcp_server.server import mcp, register_tools

    register_tools()
    mcp.attach_client(mock_client)
    yield mock_client
    mcp.detach_client()
