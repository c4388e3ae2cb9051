"""Custom exceptions for the Supabase MCP server."""


class SupabaseMCPError(Exception):
    """Base class for all server errors."""


class ConfigurationError(SupabaseMCPError):
    """Raised when required configuration is missing or invalid."""


class GatewayError(SupabaseMCPError):
    """Raised when the database service rejects or fails an operation."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ToolError(SupabaseMCPError):
    """Raised when a tool call cannot produce a result.

    The message is reported to the caller verbatim as ``Error: <message>``.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnknownToolError(ToolError):
    """Raised when a tool name is not in the catalog."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolArgumentError(ToolError):
    """Raised when tool arguments are missing or have the wrong shape."""


class ToolExecutionError(ToolError):
    """Raised when the gateway fails while executing a tool."""
