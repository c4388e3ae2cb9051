"""Command-line entry point for the Supabase MCP server."""

import asyncio
import logging
import sys

from supabase_mcp.config import load_settings
from supabase_mcp.db.client import SupabaseGateway
from supabase_mcp.exceptions import ConfigurationError
from supabase_mcp.protocol.server import ProtocolServer
from supabase_mcp.tools.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Send log records to stderr; stdout carries protocol responses."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def main() -> int:
    """Run the server until stdin closes.

    Returns:
        Process exit status: 0 after the input stream closes, 1 on a missing
        credential or any failure escaping startup or the loop
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        configure_logging()
        logger.error(f"Error: {e}")
        return 1

    configure_logging(settings.log_level)

    try:
        gateway = SupabaseGateway(settings)
        dispatcher = ToolDispatcher(
            gateway,
            tables_schema=settings.tables_schema,
            sql_function=settings.sql_function,
        )
        server = ProtocolServer(dispatcher, settings)

        logger.info("Supabase MCP Server starting...")
        logger.info(f"Connected to: {settings.supabase_url}")

        asyncio.run(server.serve(sys.stdin, sys.stdout, sys.stderr))
    except Exception:
        logger.exception("Server error")
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
