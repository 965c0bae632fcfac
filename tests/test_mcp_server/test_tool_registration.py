"""Fast tests for MCP tool registration.

These tests verify that tools are properly registered with the FastMCP server
without requiring slow subprocess or protocol integration tests.
"""

import asyncio
import inspect
import json

EXPECTED_TOOLS = {
    "search_workflows",
    "get_workflow_details",
    "execute_workflow",
    "create_workflow",
    "update_workflow",
    "delete_workflow",
    "get_executions",
    "get_execution_details",
    "activate_workflow",
    "deactivate_workflow",
    "delete_execution",
}


def list_tools():
    from n8n_mcp.mcp_server.server import mcp, register_tools

    register_tools()
    return {tool.name: tool for tool in asyncio.run(mcp.list_tools())}


class TestToolRegistration:
    """Fast tests verifying tool registration mechanism works."""

    def test_all_tools_registered(self):
        """Every n8n operation is exposed under its tool name.

        What it catches: Missing imports in register_tools(), renamed tool functions
        """
        tools = list_tools()

        assert set(tools) == EXPECTED_TOOLS, (
            f"Unexpected tool set: {sorted(tools)}\n"
            f"Check if register_tools() is missing imports in src/n8n_mcp/mcp_server/server.py"
        )

    def test_tools_have_descriptions(self):
        tools = list_tools()

        missing = [name for name, tool in tools.items() if not tool.description]
        assert not missing, f"Tools without descriptions: {missing}"

    def test_tool_functions_are_async(self):
        """Tools must be async so blocking HTTP calls can run in a worker thread."""
        from n8n_mcp.mcp_server.tools import execution_tools, workflow_tools

        for module in (execution_tools, workflow_tools):
            for name in EXPECTED_TOOLS:
                func = getattr(module, name, None)
                if func is not None:
                    assert inspect.iscoroutinefunction(func), f"{name} must be async"


class TestToolSchemas:
    """FastMCP generates schemas from function signatures; check the important constraints."""

    def test_get_workflow_details_requires_id(self):
        schema = list_tools()["get_workflow_details"].inputSchema

        assert "workflow_id" in schema["properties"]
        assert schema["required"] == ["workflow_id"]

    def test_search_workflows_has_no_required_args_and_caps_limit(self):
        schema = list_tools()["search_workflows"].inputSchema

        assert set(schema["properties"]) == {"query", "limit", "project_id"}
        assert not schema.get("required")
        assert '"maximum": 200' in json.dumps(schema)

    def test_create_workflow_requires_name_and_nodes(self):
        schema = list_tools()["create_workflow"].inputSchema

        assert set(schema["required"]) == {"name", "nodes"}
        assert {"connections", "active", "settings", "tags"} <= set(schema["properties"])
        # Node definition requires name, type and position
        node_schema = schema["$defs"]["WorkflowNode"]
        assert {"name", "type", "position"} <= set(node_schema["required"])
        assert "typeVersion" in node_schema["properties"]

    def test_execute_workflow_inputs_is_optional_union(self):
        schema = list_tools()["execute_workflow"].inputSchema

        assert schema["required"] == ["workflow_id"]
        assert "inputs" in schema["properties"]
        definitions = schema["$defs"]
        assert {"ChatInputs", "FormInputs", "WebhookInputs"} <= set(definitions)
        assert definitions["ChatInputs"]["additionalProperties"] is False

    def test_get_executions_status_enum(self):
        schema = list_tools()["get_executions"].inputSchema

        dumped = json.dumps(schema["properties"]["status"])
        for status in ("success", "error", "waiting", "running"):
            assert f'"{status}"' in dumped
        assert schema["properties"]["limit"]["default"] == 20
