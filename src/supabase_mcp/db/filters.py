"""Filter-shape dispatch for query_table.

The comparison for each filter is inferred from the JSON kind of its value,
never from an explicit operator field:

    null    -> IS NULL
    array   -> IN (membership)
    object  -> CONTAINS (structured containment)
    other   -> EQ
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from supabase_mcp.db.base import FilterClause, FilterOperator


class FilterKind(str, Enum):
    """JSON kind of a filter value."""

    NULL = "null"
    LIST = "list"
    OBJECT = "object"
    SCALAR = "scalar"


OPERATOR_FOR_KIND: dict[FilterKind, FilterOperator] = {
    FilterKind.NULL: FilterOperator.IS_NULL,
    FilterKind.LIST: FilterOperator.IN,
    FilterKind.OBJECT: FilterOperator.CONTAINS,
    FilterKind.SCALAR: FilterOperator.EQ,
}


def classify_filter(value: Any) -> FilterKind:
    """Return the kind of a parsed JSON filter value."""
    if value is None:
        return FilterKind.NULL
    if isinstance(value, (list, tuple)):
        return FilterKind.LIST
    if isinstance(value, Mapping):
        return FilterKind.OBJECT
    return FilterKind.SCALAR


def build_clauses(filters: Mapping[str, Any] | None) -> list[FilterClause]:
    """Turn a flat ``{column: value}`` mapping into filter clauses.

    Clauses keep the mapping's order. An empty or missing mapping yields none.
    """
    if not filters:
        return []

    clauses: list[FilterClause] = []
    for column, value in filters.items():
        operator = OPERATOR_FOR_KIND[classify_filter(value)]
        if operator is FilterOperator.IS_NULL:
            clauses.append(FilterClause(column=column, operator=operator))
        elif operator is FilterOperator.IN:
            clauses.append(FilterClause(column=column, operator=operator, value=list(value)))
        else:
            clauses.append(FilterClause(column=column, operator=operator, value=value))
    return clauses
