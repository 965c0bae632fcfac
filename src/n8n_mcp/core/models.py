"""Pydantic models for n8n workflows, executions and tool inputs.

Response models allow unknown fields and are serialized with
``exclude_unset`` so an object fetched from n8n is relayed exactly as it was
received. Input models describe what the MCP tools accept; the execute
``inputs`` payload is a discriminated union keyed on ``type``.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# n8n returns workflow ids as strings but execution ids as numbers on some versions
Identifier = Union[str, int]
Coordinate = Union[int, float]

ExecutionStatus = Literal["success", "error", "waiting", "running"]
HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"]


class N8nModel(BaseModel):
    """Base for models that mirror n8n API objects."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON-ready dict n8n sent or expects."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class WorkflowTag(N8nModel):
    """Tag attached to a workflow."""

    id: Identifier
    name: str


class WorkflowNode(N8nModel):
    """A single step in a workflow graph."""

    id: Optional[str] = None
    name: str
    type: str = Field(description="Node type identifier, e.g. n8n-nodes-base.webhook")
    type_version: Optional[Coordinate] = Field(default=None, alias="typeVersion")
    position: tuple[Coordinate, Coordinate] = Field(description="Canvas position as [x, y]")
    parameters: Optional[dict[str, Any]] = None
    credentials: Optional[dict[str, Any]] = None


class Workflow(N8nModel):
    """Workflow as returned by the n8n API."""

    id: Identifier
    name: str
    active: bool
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")
    version_id: Optional[str] = Field(default=None, alias="versionId")
    tags: Optional[list[WorkflowTag]] = None
    nodes: Optional[list[WorkflowNode]] = None
    connections: Optional[dict[str, Any]] = None
    settings: Optional[dict[str, Any]] = None
    static_data: Optional[dict[str, Any]] = Field(default=None, alias="staticData")

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match against the name or any tag name."""
        needle = query.lower()
        if needle in self.name.lower():
            return True
        return any(needle in tag.name.lower() for tag in self.tags or [])

    def preview(self) -> dict[str, Any]:
        """Short summary used by search results."""
        data = self.to_dict()
        return {key: data[key] for key in ("id", "name", "active", "tags", "updatedAt") if key in data}


class ExecutionResultData(N8nModel):
    """Per-node run data and the error that stopped the run, if any."""

    run_data: Optional[dict[str, Any]] = Field(default=None, alias="runData")
    error: Optional[Any] = None


class ExecutionData(N8nModel):
    result_data: Optional[ExecutionResultData] = Field(default=None, alias="resultData")


class Execution(N8nModel):
    """One run of a workflow.

    Only the id is required; queued runs come back with ``startedAt: null`` and
    older n8n versions omit ``mode`` or ``finished``.
    """

    id: Identifier
    finished: Optional[bool] = None
    mode: Optional[str] = None
    started_at: Optional[str] = Field(default=None, alias="startedAt")
    stopped_at: Optional[str] = Field(default=None, alias="stoppedAt")
    workflow_id: Optional[Identifier] = Field(default=None, alias="workflowId")
    # Relayed as-is; n8n also reports statuses such as "canceled" or "crashed"
    status: Optional[str] = None
    data: Optional[ExecutionData] = None


class CreateWorkflowInput(N8nModel):
    """Body of a create-workflow request."""

    name: str = Field(min_length=1)
    nodes: list[WorkflowNode]
    connections: Optional[dict[str, Any]] = None
    active: Optional[bool] = None
    settings: Optional[dict[str, Any]] = None
    tags: Optional[list[str]] = None


class UpdateWorkflowInput(N8nModel):
    """Partial update; only fields that were set are sent."""

    name: Optional[Annotated[str, Field(min_length=1)]] = None
    nodes: Optional[list[WorkflowNode]] = None
    connections: Optional[dict[str, Any]] = None
    active: Optional[bool] = None
    settings: Optional[dict[str, Any]] = None
    tags: Optional[list[str]] = None


class StrictInputModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ChatInputs(StrictInputModel):
    """Input for chat-triggered workflows."""

    type: Literal["chat"]
    chat_input: str = Field(alias="chatInput", description="Input for chat-based workflows")


class FormInputs(StrictInputModel):
    """Input for form-triggered workflows."""

    type: Literal["form"]
    form_data: dict[str, Any] = Field(alias="formData", description="Input data for form-based workflows")


class WebhookData(StrictInputModel):
    """HTTP request replayed against a webhook trigger."""

    method: HttpMethod = Field(default="GET", description="HTTP method (defaults to GET)")
    headers: Optional[dict[str, str]] = Field(
        default=None, description="HTTP headers (e.g., authorization, content-type)"
    )
    query: Optional[dict[str, str]] = Field(default=None, description="Query string parameters")
    body: Optional[dict[str, Any]] = Field(default=None, description="Request body data (main webhook payload)")


class WebhookInputs(StrictInputModel):
    """Input for webhook-triggered workflows."""

    type: Literal["webhook"]
    webhook_data: WebhookData = Field(alias="webhookData", description="Input data for webhook-based workflows")


WorkflowInputs = Annotated[Union[ChatInputs, FormInputs, WebhookInputs], Field(discriminator="type")]
