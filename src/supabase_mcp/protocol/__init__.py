"""Line-delimited JSON protocol loop."""

from supabase_mcp.protocol.server import LoopState, ProtocolServer

__all__ = ["LoopState", "ProtocolServer"]
