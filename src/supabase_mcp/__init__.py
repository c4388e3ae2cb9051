"""Supabase MCP Server - database tools over line-delimited JSON."""

__version__ = "1.0.0"

from supabase_mcp.exceptions import ConfigurationError, GatewayError, ToolError

__all__ = ["__version__", "ConfigurationError", "GatewayError", "ToolError"]
