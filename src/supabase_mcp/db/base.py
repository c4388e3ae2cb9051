"""Gateway protocol and filter clause types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class FilterOperator(str, Enum):
    """Comparison applied by a single filter clause."""

    IS_NULL = "is_null"
    IN = "in"
    CONTAINS = "contains"
    EQ = "eq"


@dataclass(frozen=True)
class FilterClause:
    """One column condition in a filtered select.

    Attributes:
        column: Column the condition applies to.
        operator: Comparison to apply.
        value: Comparison operand (ignored for IS_NULL).
    """

    column: str
    operator: FilterOperator
    value: Any = None


@runtime_checkable
class DatabaseBackend(Protocol):
    """Protocol every database gateway must satisfy.

    Implementations raise GatewayError with the service's message when an
    operation fails; they never interpret error codes.
    """

    async def list_tables(self, schema: str) -> list[str]: ...

    async def select(
        self,
        table: str,
        clauses: list[FilterClause],
        limit: int | None = None,
    ) -> list[dict[str, Any]]: ...

    async def insert(self, table: str, row: dict[str, Any]) -> list[dict[str, Any]]: ...

    async def update(
        self,
        table: str,
        row_id: str | int,
        changes: dict[str, Any],
    ) -> list[dict[str, Any]]: ...

    async def delete(self, table: str, row_id: str | int) -> None: ...

    async def rpc(self, function: str, params: dict[str, Any]) -> Any: ...
