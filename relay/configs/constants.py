"""
Relay Constants

Static values that rarely change: wire headers, JSON-RPC error codes,
event-stream framing, and timeout configuration.
"""

# --- Wire Headers ---

SESSION_HEADER = "Mcp-Session-Id"
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_EVENT_STREAM = "text/event-stream"
ACCEPT_HEADER = f"{CONTENT_TYPE_JSON}, {CONTENT_TYPE_EVENT_STREAM}"

# --- Status Codes ---

STATUS_ACCEPTED = 202
STATUS_SESSION_EXPIRED = 404

# --- Event Stream ---

SSE_DATA_PREFIX = "data: "

# --- JSON-RPC ---

JSONRPC_VERSION = "2.0"
JSONRPC_INTERNAL_ERROR = -32603

# --- Timeout Configuration ---
# Centralized timeout values (in seconds)

TIMEOUTS = {
    "http_connect": 10,  # TCP/TLS connect to the remote server
    "http_read": 300,  # Gap between bytes; event streams can idle for a while
}


def get_timeout(key: str, default: int | float | None = None) -> int | float:
    """
    Get a timeout value by key.

    Args:
        key: Timeout key from TIMEOUTS dict
        default: Default value if key not found

    Returns:
        Timeout value in seconds
    """
    if default is None:
        default = TIMEOUTS["http_connect"]
    return TIMEOUTS.get(key, default)
