"""Tool catalog and dispatcher."""

from supabase_mcp.tools.base import ToolDescriptor, ToolParameter
from supabase_mcp.tools.catalog import TOOL_CATALOG
from supabase_mcp.tools.dispatcher import ToolDispatcher

__all__ = [
    "TOOL_CATALOG",
    "ToolDescriptor",
    "ToolDispatcher",
    "ToolParameter",
]
