"""Tests for n8n://workflow/<id> resources."""

import json

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_REQUEST

from n8n_mcp.core.exceptions import N8nNotFoundError
from n8n_mcp.core.models import Workflow
from n8n_mcp.mcp_server.resources import (
    list_workflow_resources,
    parse_workflow_uri,
    read_workflow_resource,
    workflow_uri,
)


class TestWorkflowUri:
    def test_build_and_parse(self):
        assert workflow_uri("123") == "n8n://workflow/123"
        assert parse_workflow_uri("n8n://workflow/123") == "123"

    @pytest.mark.parametrize("uri", ["bad-uri", "n8n://workflow/", "n8n://execution/1", "http://workflow/1"])
    def test_invalid_uris_rejected(self, uri):
        with pytest.raises(McpError) as exc_info:
            parse_workflow_uri(uri)

        assert exc_info.value.error.code == INVALID_REQUEST
        assert exc_info.value.error.message == f"Invalid resource URI: {uri}"


class TestListWorkflowResources:
    def test_one_resource_per_workflow(self, mock_client, sample_workflows):
        mock_client.list_workflows.return_value = [Workflow.model_validate(w) for w in sample_workflows]

        resources = list_workflow_resources(mock_client)

        mock_client.list_workflows.assert_called_once_with()
        assert [str(r.uri) for r in resources] == [
            "n8n://workflow/wf-1",
            "n8n://workflow/wf-2",
            "n8n://workflow/wf-3",
        ]
        assert all(r.mimeType == "application/json" for r in resources)
        assert resources[0].name == "Slack Notifier"
        assert resources[0].description == "Workflow: Slack Notifier (active)"
        assert resources[1].description == "Workflow: GitHub PR Analyzer (inactive)"

    def test_list_failure_translated(self, mock_client):
        mock_client.list_workflows.side_effect = RuntimeError("boom")

        with pytest.raises(McpError) as exc_info:
            list_workflow_resources(mock_client)

        assert exc_info.value.error.code == INTERNAL_ERROR


class TestReadWorkflowResource:
    def test_reads_single_workflow(self, mock_client, sample_workflow):
        mock_client.get_workflow.return_value = Workflow.model_validate(sample_workflow)

        text = read_workflow_resource(mock_client, "n8n://workflow/123")

        mock_client.get_workflow.assert_called_once_with("123")
        assert json.loads(text) == sample_workflow

    def test_bad_uri_makes_no_calls(self, mock_client):
        with pytest.raises(McpError) as exc_info:
            read_workflow_resource(mock_client, "bad-uri")

        assert exc_info.value.error.code == INVALID_REQUEST
        mock_client.get_workflow.assert_not_called()
        mock_client.list_workflows.assert_not_called()

    def test_missing_workflow_is_internal_error(self, mock_client):
        mock_client.get_workflow.side_effect = N8nNotFoundError("404", status_code=404, remote_message="Not Found")

        with pytest.raises(McpError) as exc_info:
            read_workflow_resource(mock_client, "n8n://workflow/999")

        assert exc_info.value.error.code == INTERNAL_ERROR
        assert exc_info.value.error.message == "Not Found"
