"""
JSON-RPC error replies for messages that could not be forwarded.

The stdio client waits for exactly one reply per request, so a failed
forward is answered locally with an Internal error (-32603). Notifications
and unparseable lines get no reply.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional

from relay.configs.constants import JSONRPC_INTERNAL_ERROR, JSONRPC_VERSION


@dataclass
class JsonRpcEnvelope:
    """Partial view of a JSON-RPC message: only what an error reply needs."""

    jsonrpc: str
    id: Any = None

    @property
    def is_notification(self) -> bool:
        return self.id is None

    @classmethod
    def parse(cls, text: str) -> Optional["JsonRpcEnvelope"]:
        """Decode `text`, or return None if it is not a JSON-RPC object."""
        try:
            data = json.loads(text)
        except ValueError:
            return None

        if not isinstance(data, dict) or not isinstance(data.get("jsonrpc"), str):
            return None
        return cls(jsonrpc=data["jsonrpc"], id=data.get("id"))


def error_reply(message: str, error: Exception) -> Optional[str]:
    """
    Build the error reply for a message whose forward failed.

    Args:
        message: The original outgoing line
        error: Why forwarding failed; its text becomes error.message

    Returns:
        Compact JSON-RPC error text, or None for notifications and bad input
    """
    envelope = JsonRpcEnvelope.parse(message)
    if envelope is None or envelope.is_notification:
        return None

    return json.dumps(
        {
            "jsonrpc": JSONRPC_VERSION,
            "id": envelope.id,
            "error": {"code": JSONRPC_INTERNAL_ERROR, "message": str(error)},
        },
        separators=(",", ":"),
        ensure_ascii=False,
    )
