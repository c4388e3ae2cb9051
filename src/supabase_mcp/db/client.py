"""Supabase database gateway."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from supabase_mcp.config import Settings, get_settings
from supabase_mcp.db.base import FilterClause, FilterOperator
from supabase_mcp.exceptions import GatewayError

logger = logging.getLogger(__name__)

# Each operator maps to one PostgREST builder call.
_APPLY_CLAUSE: dict[FilterOperator, Callable[[Any, FilterClause], Any]] = {
    FilterOperator.IS_NULL: lambda query, clause: query.is_(clause.column, "null"),
    FilterOperator.IN: lambda query, clause: query.in_(clause.column, clause.value),
    FilterOperator.CONTAINS: lambda query, clause: query.contains(clause.column, clause.value),
    FilterOperator.EQ: lambda query, clause: query.eq(clause.column, clause.value),
}


@contextmanager
def _service_errors() -> Iterator[None]:
    """Translate PostgREST and transport failures into GatewayError."""
    try:
        yield
    except APIError as e:
        raise GatewayError(e.message or str(e)) from e
    except httpx.HTTPError as e:
        raise GatewayError(str(e) or type(e).__name__) from e


class SupabaseGateway:
    """Single long-lived handle to the Supabase REST API.

    Owns the endpoint and credential. Operations are forwarded as-is; there is
    no retry, pooling, or circuit breaking.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.url = settings.supabase_url
        self.client: Client = create_client(
            settings.supabase_url,
            settings.supabase_api_key,
        )

    async def list_tables(self, schema: str = "public") -> list[str]:
        """List table names in a schema.

        Args:
            schema: Schema to introspect

        Returns:
            Table names, possibly empty
        """
        with _service_errors():
            result = (
                self.client.schema("information_schema")
                .table("tables")
                .select("table_name")
                .eq("table_schema", schema)
                .execute()
            )
        rows = result.data or []
        logger.debug(f"Listed {len(rows)} tables in schema {schema}")
        return [row["table_name"] for row in rows]

    async def select(
        self,
        table: str,
        clauses: list[FilterClause],
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Select rows matching every clause.

        Args:
            table: Table name
            clauses: Filter clauses, applied in order
            limit: Optional row cap

        Returns:
            Matching rows
        """
        with _service_errors():
            query = self.client.table(table).select("*")
            for clause in clauses:
                query = _APPLY_CLAUSE[clause.operator](query, clause)
            if limit:
                query = query.limit(limit)
            result = query.execute()
        rows = result.data or []
        logger.debug(f"Selected {len(rows)} rows from {table}")
        return rows

    async def insert(self, table: str, row: dict[str, Any]) -> list[dict[str, Any]]:
        """Insert one row and return the stored representation."""
        with _service_errors():
            result = self.client.table(table).insert(row).execute()
        logger.debug(f"Inserted row into {table}")
        return result.data or []

    async def update(
        self,
        table: str,
        row_id: str | int,
        changes: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """Update the row whose id column equals row_id.

        Returns:
            Updated rows (empty when no row matched)
        """
        with _service_errors():
            result = self.client.table(table).update(changes).eq("id", row_id).execute()
        logger.debug(f"Updated row {row_id} in {table}")
        return result.data or []

    async def delete(self, table: str, row_id: str | int) -> None:
        """Delete the row whose id column equals row_id."""
        with _service_errors():
            self.client.table(table).delete().eq("id", row_id).execute()
        logger.debug(f"Deleted row {row_id} from {table}")

    async def rpc(self, function: str, params: dict[str, Any]) -> Any:
        """Invoke a remote procedure and return its data."""
        with _service_errors():
            result = self.client.rpc(function, params).execute()
        logger.debug(f"Called remote procedure {function}")
        return result.data
