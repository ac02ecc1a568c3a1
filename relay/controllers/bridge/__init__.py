"""
MCP Stdio-to-HTTP Bridge

Reads JSON-RPC messages from stdin, forwards them to a streamable-HTTP
server, and writes responses to stdout.
"""

from relay.controllers.bridge.bridge import main, run
from relay.controllers.bridge.envelope import JsonRpcEnvelope, error_reply
from relay.controllers.bridge.pump import LinePump
from relay.controllers.bridge.session import SessionBridge

__all__ = ["main", "run", "JsonRpcEnvelope", "error_reply", "LinePump", "SessionBridge"]
