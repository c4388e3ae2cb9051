"""Tool dispatcher: maps tool names to gateway operations."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from supabase_mcp.db.base import DatabaseBackend
from supabase_mcp.db.filters import build_clauses
from supabase_mcp.exceptions import GatewayError, ToolExecutionError, UnknownToolError
from supabase_mcp.tools.arguments import (
    DeleteRowArgs,
    ExecuteSqlArgs,
    InsertRowArgs,
    ListTablesArgs,
    QueryTableArgs,
    ToolArguments,
    UpdateRowArgs,
    parse_arguments,
)
from supabase_mcp.tools.base import ToolDescriptor
from supabase_mcp.tools.catalog import TOOL_CATALOG

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Awaitable[dict[str, Any]]]


@dataclass(frozen=True)
class _Route:
    arguments: type[ToolArguments]
    handler: Handler
    failure_prefix: str


class ToolDispatcher:
    """Executes one catalog tool per call against a database gateway.

    Every failure leaves as a ToolError subclass carrying a single message;
    gateway errors are wrapped with the tool's failure prefix.
    """

    def __init__(
        self,
        gateway: DatabaseBackend,
        tables_schema: str = "public",
        sql_function: str = "execute_sql",
    ) -> None:
        self.gateway = gateway
        self.tables_schema = tables_schema
        self.sql_function = sql_function
        self._routes: dict[str, _Route] = {
            "list_tables": _Route(ListTablesArgs, self._list_tables, "Failed to list tables:"),
            "query_table": _Route(QueryTableArgs, self._query_table, "Query failed:"),
            "insert_row": _Route(InsertRowArgs, self._insert_row, "Insert failed:"),
            "update_row": _Route(UpdateRowArgs, self._update_row, "Update failed:"),
            "delete_row": _Route(DeleteRowArgs, self._delete_row, "Delete failed:"),
            "execute_sql": _Route(ExecuteSqlArgs, self._execute_sql, "SQL execution failed:"),
        }

    @property
    def catalog(self) -> tuple[ToolDescriptor, ...]:
        return TOOL_CATALOG

    async def call(self, name: str, arguments: Any = None) -> dict[str, Any]:
        """Execute a tool by name.

        Args:
            name: Tool name from the catalog
            arguments: Raw JSON arguments for the tool

        Returns:
            Tool-specific result mapping

        Raises:
            UnknownToolError: If the name is not in the catalog
            ToolArgumentError: If the arguments are invalid
            ToolExecutionError: If the database operation fails
        """
        route = self._routes.get(name) if isinstance(name, str) else None
        if route is None:
            raise UnknownToolError(name)

        args = parse_arguments(route.arguments, arguments, route.failure_prefix)
        logger.info(f"Calling tool {name}")
        try:
            return await route.handler(args)
        except GatewayError as e:
            logger.warning(f"Tool {name} failed: {e.message}")
            raise ToolExecutionError(f"{route.failure_prefix} {e.message}") from e
        except Exception as e:
            logger.exception(f"Tool {name} raised unexpectedly")
            raise ToolExecutionError(f"{route.failure_prefix} {e}") from e

    async def _list_tables(self, args: ListTablesArgs) -> dict[str, Any]:
        tables = await self.gateway.list_tables(self.tables_schema)
        return {"tables": tables}

    async def _query_table(self, args: QueryTableArgs) -> dict[str, Any]:
        clauses = build_clauses(args.filters)
        rows = await self.gateway.select(args.table, clauses, limit=args.limit or None)
        return {"data": rows, "count": len(rows)}

    async def _insert_row(self, args: InsertRowArgs) -> dict[str, Any]:
        inserted = await self.gateway.insert(args.table, args.data)
        return {"inserted": inserted}

    async def _update_row(self, args: UpdateRowArgs) -> dict[str, Any]:
        updated = await self.gateway.update(args.table, args.id, args.data)
        return {"updated": updated}

    async def _delete_row(self, args: DeleteRowArgs) -> dict[str, Any]:
        # Existence is not checked; deleting an absent id still reports success.
        await self.gateway.delete(args.table, args.id)
        return {"success": True, "message": f"Row {args.id} deleted"}

    async def _execute_sql(self, args: ExecuteSqlArgs) -> dict[str, Any]:
        result = await self.gateway.rpc(self.sql_function, {"query": args.query})
        return {"result": result}
