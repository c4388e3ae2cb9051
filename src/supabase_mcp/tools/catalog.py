"""The fixed catalog of database tools."""

from supabase_mcp.tools.base import ToolDescriptor, ToolParameter

_TABLE = ToolParameter("table", "string", "Table name", required=True)

LIST_TABLES = ToolDescriptor(
    name="list_tables",
    description="Get all tables from the Supabase database",
)

QUERY_TABLE = ToolDescriptor(
    name="query_table",
    description="Query data from a specific table with optional filters and limit",
    parameters=(
        _TABLE,
        ToolParameter("filters", "object", "Optional filters {column: value}"),
        ToolParameter("limit", "number", "Number of rows to return"),
    ),
)

INSERT_ROW = ToolDescriptor(
    name="insert_row",
    description="Insert a new row into a table",
    parameters=(
        _TABLE,
        ToolParameter("data", "object", "Row data to insert", required=True),
    ),
)

UPDATE_ROW = ToolDescriptor(
    name="update_row",
    description="Update an existing row in a table",
    parameters=(
        _TABLE,
        ToolParameter("id", "string", "Row ID to update", required=True),
        ToolParameter("data", "object", "Data to update", required=True),
    ),
)

DELETE_ROW = ToolDescriptor(
    name="delete_row",
    description="Delete a row from a table",
    parameters=(
        _TABLE,
        ToolParameter("id", "string", "Row ID to delete", required=True),
    ),
)

EXECUTE_SQL = ToolDescriptor(
    name="execute_sql",
    description="Execute a custom SQL query (read-only recommended)",
    parameters=(
        ToolParameter("query", "string", "SQL query to execute", required=True),
    ),
)

TOOL_CATALOG: tuple[ToolDescriptor, ...] = (
    LIST_TABLES,
    QUERY_TABLE,
    INSERT_ROW,
    UPDATE_ROW,
    DELETE_ROW,
    EXECUTE_SQL,
)
