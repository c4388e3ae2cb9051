"""Per-tool argument models.

Incoming arguments are arbitrary JSON. Each tool validates them against its
model before anything is sent to the database.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from supabase_mcp.exceptions import ToolArgumentError


class ToolArguments(BaseModel):
    """Base for tool argument models. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class ListTablesArgs(ToolArguments):
    pass


class QueryTableArgs(ToolArguments):
    table: str = Field(min_length=1)
    filters: dict[str, Any] | None = None
    limit: int | None = Field(default=None, ge=0)  # 0 means no cap


class InsertRowArgs(ToolArguments):
    table: str = Field(min_length=1)
    data: dict[str, Any]


class UpdateRowArgs(ToolArguments):
    table: str = Field(min_length=1)
    id: str | int
    data: dict[str, Any]


class DeleteRowArgs(ToolArguments):
    table: str = Field(min_length=1)
    id: str | int


class ExecuteSqlArgs(ToolArguments):
    query: str = Field(min_length=1)


def format_validation_error(error: ValidationError, root: str = "arguments") -> str:
    """Render a pydantic error as ``field: reason; field: reason``."""
    parts = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or root
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


def parse_arguments(
    model: type[ToolArguments],
    arguments: Any,
    prefix: str,
) -> ToolArguments:
    """Validate raw arguments against a tool's model.

    Args:
        model: Argument model for the tool
        arguments: Raw JSON value from the call (None is treated as {})
        prefix: Failure prefix of the tool, kept at the start of the message

    Raises:
        ToolArgumentError: If the arguments do not fit the model
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise ToolArgumentError(f"{prefix} invalid arguments (arguments: must be an object)")
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        raise ToolArgumentError(f"{prefix} invalid arguments ({format_validation_error(e)})") from e
