"""Protocol loop: one JSON request line in, one JSON response line out."""

import asyncio
import json
import logging
from enum import Enum
from typing import Any, TextIO

from pydantic import ValidationError

from supabase_mcp.config import Settings
from supabase_mcp.exceptions import ToolArgumentError, ToolError
from supabase_mcp.protocol.models import (
    ErrorResult,
    InitializeResult,
    ProtocolRequest,
    ServerInfo,
    TextContent,
    ToolCallParams,
    ToolCallResult,
    ToolListResult,
)
from supabase_mcp.tools.arguments import format_validation_error
from supabase_mcp.tools.dispatcher import ToolDispatcher

logger = logging.getLogger(__name__)


class LoopState(str, Enum):
    """Lifecycle state of the protocol loop."""

    IDLE = "idle"
    DISPATCHING = "dispatching"
    CLOSED = "closed"


class RequestParseError(ValueError):
    """Raised when an input line is not a JSON request object."""


def encode_line(payload: Any, indent: int | None = None) -> str:
    """Serialize a payload as JSON, rendering unknown types with str()."""
    separators = None if indent else (",", ":")
    return json.dumps(
        payload,
        indent=indent,
        separators=separators,
        ensure_ascii=False,
        default=str,
    )


def parse_request(line: str) -> ProtocolRequest:
    """Parse one input line into a request envelope.

    Raises:
        RequestParseError: If the line is not a JSON object
    """
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as e:
        raise RequestParseError(f"Invalid JSON: {e.msg}") from e
    except RecursionError as e:
        raise RequestParseError("Invalid JSON: nesting too deep") from e
    if not isinstance(payload, dict):
        raise RequestParseError("Request must be a JSON object")
    return ProtocolRequest.model_validate(payload)


def read_line(instream: TextIO) -> str:
    """Read one line, replacing undecodable bytes instead of failing.

    Streams backed by a binary buffer (stdin) are read as bytes and decoded as
    UTF-8 with replacement characters, so a bad line becomes a parse error.
    """
    buffer = getattr(instream, "buffer", None)
    if buffer is None:
        return instream.readline()
    return buffer.readline().decode("utf-8", errors="replace")


class ProtocolServer:
    """Routes request envelopes and owns the read loop.

    Requests are handled strictly one at a time: a line is fully dispatched,
    including any database round trip, before the next line is read.
    """

    def __init__(self, dispatcher: ToolDispatcher, settings: Settings) -> None:
        self.dispatcher = dispatcher
        self.settings = settings
        self.state = LoopState.IDLE

    async def handle_request(self, request: ProtocolRequest) -> dict[str, Any]:
        """Build the response for one request envelope."""
        if request.method == "initialize":
            return self._initialize()
        if request.method == "tools/list":
            return ToolListResult(
                tools=[descriptor.to_dict() for descriptor in self.dispatcher.catalog]
            ).to_wire()
        if request.method == "tools/call":
            return await self._call_tool(request.params)

        logger.warning(f"Unknown method: {request.method}")
        return ErrorResult(error="Unknown method").to_wire()

    def _initialize(self) -> dict[str, Any]:
        return InitializeResult(
            protocol_version=self.settings.protocol_version,
            server_info=ServerInfo(
                name=self.settings.server_name,
                version=self.settings.server_version,
            ),
        ).to_wire()

    async def _call_tool(self, params: Any) -> dict[str, Any]:
        try:
            try:
                call = ToolCallParams.model_validate(params)
            except ValidationError as e:
                raise ToolArgumentError(
                    f"Invalid tool call ({format_validation_error(e, root='params')})"
                ) from e
            result = await self.dispatcher.call(call.name, call.arguments)
        except ToolError as e:
            return ToolCallResult(
                content=[TextContent(text=f"Error: {e.message}")],
                is_error=True,
            ).to_wire()

        return ToolCallResult(
            content=[TextContent(text=encode_line(result, indent=2))],
        ).to_wire()

    async def process_line(self, line: str, errstream: TextIO) -> str | None:
        """Handle one input line.

        Returns:
            The response line, or None when the line could not be parsed (a
            diagnostic is written to errstream instead)
        """
        self.state = LoopState.DISPATCHING
        try:
            request = parse_request(line)
        except RequestParseError as e:
            logger.debug(f"Rejected input line: {e}")
            errstream.write(encode_line({"error": str(e)}) + "\n")
            errstream.flush()
            return None
        else:
            return encode_line(await self.handle_request(request))
        finally:
            self.state = LoopState.IDLE

    async def serve(self, instream: TextIO, outstream: TextIO, errstream: TextIO) -> None:
        """Run until the input stream closes."""
        self.state = LoopState.IDLE
        while True:
            line = await asyncio.to_thread(read_line, instream)
            if not line:
                break
            response = await self.process_line(line.rstrip("\r\n"), errstream)
            if response is not None:
                outstream.write(response + "\n")
                outstream.flush()

        self.state = LoopState.CLOSED
        logger.info("Server closed")
