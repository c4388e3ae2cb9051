"""Allow ``python -m supabase_mcp``."""

from supabase_mcp.main import run

if __name__ == "__main__":
    run()
