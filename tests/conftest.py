"""Global test configuration for the Supabase MCP server."""

import os
from typing import Any

import pytest

from supabase_mcp.db.base import FilterClause, FilterOperator
from supabase_mcp.exceptions import GatewayError


@pytest.fixture(autouse=True, scope="session")
def _set_test_env_vars():
    """Set dummy environment variables for Settings validation.

    Only sets values that aren't already present, so real env vars take
    precedence.
    """
    defaults = {
        "SUPABASE_URL": "https://test.supabase.co",
        "SUPABASE_API_KEY": "test-supabase-key",
    }
    originals = {}
    for key, value in defaults.items():
        if key not in os.environ:
            os.environ[key] = value
            originals[key] = None
        else:
            originals[key] = os.environ[key]

    from supabase_mcp.config import get_settings
    get_settings.cache_clear()

    yield

    for key, original in originals.items():
        if original is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original
    get_settings.cache_clear()


def _matches(row: dict[str, Any], clause: FilterClause) -> bool:
    current = row.get(clause.column)
    if clause.operator is FilterOperator.IS_NULL:
        return current is None
    if clause.operator is FilterOperator.IN:
        return current in clause.value
    if clause.operator is FilterOperator.CONTAINS:
        if isinstance(current, dict):
            return all(current.get(k) == v for k, v in clause.value.items())
        return False
    return current == clause.value


class FakeGateway:
    """In-memory DatabaseBackend that records every call."""

    def __init__(self, tables: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self.tables = tables if tables is not None else {}
        self.calls: list[tuple[str, tuple]] = []
        self.rpc_result: Any = None
        self.fail_with: str | None = None
        self.raise_exc: Exception | None = None
        self._next_id = 1

    def _record(self, op: str, *args: Any) -> None:
        self.calls.append((op, args))
        if self.fail_with is not None:
            raise GatewayError(self.fail_with)
        if self.raise_exc is not None:
            raise self.raise_exc

    @property
    def last_clauses(self) -> list[FilterClause]:
        selects = [args for op, args in self.calls if op == "select"]
        return selects[-1][1]

    async def list_tables(self, schema: str) -> list[str]:
        self._record("list_tables", schema)
        return sorted(self.tables)

    async def select(self, table, clauses, limit=None):
        self._record("select", table, clauses, limit)
        rows = [r for r in self.tables.get(table, []) if all(_matches(r, c) for c in clauses)]
        if limit:
            rows = rows[:limit]
        return [dict(r) for r in rows]

    async def insert(self, table, row):
        self._record("insert", table, row)
        stored = dict(row)
        if "id" not in stored:
            stored["id"] = self._next_id
            self._next_id += 1
        self.tables.setdefault(table, []).append(stored)
        return [dict(stored)]

    async def update(self, table, row_id, changes):
        self._record("update", table, row_id, changes)
        updated = []
        for row in self.tables.get(table, []):
            if str(row.get("id")) == str(row_id):
                row.update(changes)
                updated.append(dict(row))
        return updated

    async def delete(self, table, row_id):
        self._record("delete", table, row_id)
        rows = self.tables.get(table, [])
        self.tables[table] = [r for r in rows if str(r.get("id")) != str(row_id)]

    async def rpc(self, function, params):
        self._record("rpc", function, params)
        return self.rpc_result


@pytest.fixture
def fake_gateway():
    """Gateway seeded with a small users table."""
    return FakeGateway(
        {
            "users": [
                {"id": 1, "name": "Ada", "email": "ada@example.com", "meta": {"role": "admin"}},
                {"id": 2, "name": "Grace", "email": None, "meta": {"role": "user"}},
                {"id": 3, "name": "Linus", "email": "linus@example.com", "meta": {"role": "user"}},
                {"id": 4, "name": "Barbara", "email": None, "meta": {"role": "user"}},
                {"id": 5, "name": "Ken", "email": "ken@example.com", "meta": {"role": "admin"}},
            ],
            "orders": [],
        }
    )


@pytest.fixture
def settings():
    from supabase_mcp.config import Settings
    return Settings(supabase_url="https://test.supabase.co", supabase_api_key="test-key")


@pytest.fixture
def dispatcher(fake_gateway):
    from supabase_mcp.tools.dispatcher import ToolDispatcher
    return ToolDispatcher(fake_gateway)


@pytest.fixture
def server(dispatcher, settings):
    from supabase_mcp.protocol.server import ProtocolServer
    return ProtocolServer(dispatcher, settings)
