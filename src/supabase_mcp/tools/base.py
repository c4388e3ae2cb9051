"""Tool descriptor for the advertised tool catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ToolParameter:
    """One named input of a tool.

    Attributes:
        name: Argument key in the call's ``arguments`` object.
        type: JSON-Schema type name ("string", "object", "number").
        description: Human-readable summary.
        required: Whether the caller must supply it.
    """

    name: str
    type: str
    description: str
    required: bool = False


@dataclass(frozen=True)
class ToolDescriptor:
    """Immutable metadata descriptor for a tool.

    Attributes:
        name: Stable unique identifier (e.g. "query_table").
        description: Human-readable summary of the tool.
        parameters: Declared inputs, in advertised order.
    """

    name: str
    description: str
    parameters: tuple[ToolParameter, ...] = field(default_factory=tuple)

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.parameters if p.required)

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON-Schema object describing the tool's arguments.

        Built fresh on each access so callers cannot mutate the descriptor.
        """
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {
                p.name: {"type": p.type, "description": p.description}
                for p in self.parameters
            },
        }
        if self.required:
            schema["required"] = list(self.required)
        return schema

    def to_dict(self) -> dict[str, Any]:
        """Wire form advertised by tools/list."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }
