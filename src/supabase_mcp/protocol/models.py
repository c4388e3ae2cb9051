"""Protocol envelope models."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for envelope models; camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ProtocolRequest(WireModel):
    """One incoming request line."""

    model_config = ConfigDict(extra="ignore")

    method: Any = None
    params: Any = None


class ToolCallParams(WireModel):
    """``params`` of a tools/call request."""

    model_config = ConfigDict(extra="ignore")

    name: Any  # non-string names are reported as unknown tools
    arguments: Any = None


class ServerInfo(WireModel):
    name: str
    version: str


class InitializeResult(WireModel):
    protocol_version: str
    capabilities: dict[str, Any] = Field(default_factory=lambda: {"tools": {}})
    server_info: ServerInfo


class ToolListResult(WireModel):
    tools: list[dict[str, Any]]


class TextContent(WireModel):
    type: Literal["text"] = "text"
    text: str


class ToolCallResult(WireModel):
    """Content-wrapped outcome of a tool call."""

    content: list[TextContent]
    is_error: bool | None = None


class ErrorResult(WireModel):
    """Generic reply for unknown methods."""

    error: str
