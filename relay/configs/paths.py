"""
Relay Data Paths

Location of the relay's config file and log file.
"""

import os
from pathlib import Path

DEFAULT_DATA_PATH = Path.home() / ".mcp-relay"


def get_data_path() -> Path:
    """Get the relay data directory path.

    Honours MCP_RELAY_DATA_PATH, otherwise ~/.mcp-relay.
    """
    data_path = os.environ.get("MCP_RELAY_DATA_PATH")
    if data_path:
        return Path(data_path).expanduser()
    return DEFAULT_DATA_PATH


def ensure_data_dir() -> Path:
    """Create the data directory if needed and return it."""
    data_path = get_data_path()
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path
