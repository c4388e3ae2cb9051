"""Tests for the process entry point and exit codes."""

import io
import json
from unittest.mock import patch

import pytest

from supabase_mcp import main as entry


class TestMain:

    def test_missing_api_key_exits_1(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("SUPABASE_API_KEY", raising=False)
        with patch("supabase_mcp.main.SupabaseGateway") as gateway_cls:
            assert entry.main() == 1
        gateway_cls.assert_not_called()

    def test_stream_close_exits_0(self, monkeypatch, fake_gateway):
        stdout = io.StringIO()
        monkeypatch.setattr("sys.stdin", io.StringIO('{"method":"tools/list"}\n'))
        monkeypatch.setattr("sys.stdout", stdout)

        with patch("supabase_mcp.main.SupabaseGateway", return_value=fake_gateway):
            assert entry.main() == 0

        [line] = stdout.getvalue().splitlines()
        assert len(json.loads(line)["tools"]) == 6

    def test_startup_failure_exits_1(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        with patch("supabase_mcp.main.SupabaseGateway", side_effect=RuntimeError("boom")):
            assert entry.main() == 1

    def test_run_passes_exit_status(self):
        with patch("supabase_mcp.main.main", return_value=1):
            with pytest.raises(SystemExit) as exc_info:
                entry.run()
        assert exc_info.value.code == 1
