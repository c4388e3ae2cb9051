"""Database gateway for the hosted Supabase backend."""

from supabase_mcp.db.base import DatabaseBackend, FilterClause, FilterOperator
from supabase_mcp.db.client import SupabaseGateway
from supabase_mcp.db.filters import FilterKind, build_clauses, classify_filter

__all__ = [
    "DatabaseBackend",
    "FilterClause",
    "FilterKind",
    "FilterOperator",
    "SupabaseGateway",
    "build_clauses",
    "classify_filter",
]
