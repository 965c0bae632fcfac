"""Thin wrapper over the n8n REST API.

Each public method performs exactly one HTTP request (search performs one list
request and filters in memory) and unwraps the ``{"data": ...}`` envelope n8n
puts around every response. Errors are not retried or recovered here.
"""

import logging
from typing import Any, Optional

import requests

from n8n_mcp.core.config import N8nConfig
from n8n_mcp.core.exceptions import N8nAPIError, N8nNotFoundError
from n8n_mcp.core.models import CreateWorkflowInput, Execution, UpdateWorkflowInput, Workflow

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-N8N-API-KEY"


class N8nClient:
    """Client for the n8n workflows and executions endpoints."""

    def __init__(self, config: N8nConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update({
            API_KEY_HEADER: config.api_key,
            "Content-Type": "application/json",
        })

    # ----- workflows -----

    def list_workflows(
        self,
        active: Optional[bool] = None,
        tags: Optional[list[str]] = None,
        limit: Optional[int] = None,
        project_id: Optional[str] = None,
    ) -> list[Workflow]:
        """List workflows, passing only the filters that were given."""
        params: dict[str, Any] = {}
        if active is not None:
            # requests would send Python's "True"; n8n expects lowercase
            params["active"] = "true" if active else "false"
        if tags:
            params["tags"] = ",".join(tags)
        if limit:
            params["limit"] = limit
        if project_id:
            params["projectId"] = project_id

        data = self._request("GET", "/workflows", params=params)
        return [Workflow.model_validate(item) for item in data]

    def get_workflow(self, workflow_id: str) -> Workflow:
        data = self._request("GET", f"/workflows/{workflow_id}")
        return Workflow.model_validate(data)

    def create_workflow(self, workflow: CreateWorkflowInput) -> Workflow:
        data = self._request("POST", "/workflows", json_body=workflow.to_dict())
        return Workflow.model_validate(data)

    def update_workflow(self, workflow_id: str, updates: UpdateWorkflowInput) -> Workflow:
        """Send a partial update; n8n applies only the fields present in the body."""
        data = self._request("PATCH", f"/workflows/{workflow_id}", json_body=updates.to_dict())
        return Workflow.model_validate(data)

    def delete_workflow(self, workflow_id: str) -> None:
        self._request("DELETE", f"/workflows/{workflow_id}")

    def activate_workflow(self, workflow_id: str) -> Workflow:
        return self.update_workflow(workflow_id, UpdateWorkflowInput(active=True))

    def deactivate_workflow(self, workflow_id: str) -> Workflow:
        return self.update_workflow(workflow_id, UpdateWorkflowInput(active=False))

    def execute_workflow(self, workflow_id: str, inputs: Optional[dict[str, Any]] = None) -> Execution:
        """Trigger a run. ``inputs`` is sent as the request body (empty object when omitted)."""
        data = self._request("POST", f"/workflows/{workflow_id}/execute", json_body=inputs or {})
        return Execution.model_validate(data)

    def search_workflows(self, query: str) -> list[Workflow]:
        """Filter the full workflow list by name or tag name.

        n8n has no search endpoint, so this fetches every workflow on each call.
        """
        workflows = self.list_workflows()
        return [workflow for workflow in workflows if workflow.matches(query)]

    # ----- executions -----

    def get_executions(
        self,
        workflow_id: str,
        limit: Optional[int] = None,
        status: Optional[str] = None,
    ) -> list[Execution]:
        params: dict[str, Any] = {"workflowId": workflow_id}
        if limit:
            params["limit"] = limit
        if status:
            params["status"] = status

        data = self._request("GET", "/executions", params=params)
        return [Execution.model_validate(item) for item in data]

    def get_execution(self, execution_id: str) -> Execution:
        data = self._request("GET", f"/executions/{execution_id}")
        return Execution.model_validate(data)

    def delete_execution(self, execution_id: str) -> None:
        self._request("DELETE", f"/executions/{execution_id}")

    # ----- transport -----

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json_body: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Perform one request and return the unwrapped ``data`` payload.

        Raises:
            N8nNotFoundError: On HTTP 404
            N8nAPIError: On any other non-2xx status
            requests.RequestException: On transport failures (propagated as-is)
        """
        url = f"{self.config.api_url}{path}"
        logger.debug(f"{method} {url} params={params}")

        response = self.session.request(method=method, url=url, params=params, json=json_body)

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            raise _api_error_from(response, e) from e

        if not response.content:
            return None

        body = response.json()
        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body


def _api_error_from(response: requests.Response, error: requests.HTTPError) -> N8nAPIError:
    remote_message: Optional[str] = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
        remote_message = body["message"]

    error_cls = N8nNotFoundError if response.status_code == 404 else N8nAPIError
    logger.debug(f"n8n API returned {response.status_code}: {remote_message or error}")
    return error_cls(str(error), status_code=response.status_code, remote_message=remote_message)
