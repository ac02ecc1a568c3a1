"""
Relay Logging Configuration

Stdout carries the JSON-RPC stream, so log records only ever go to stderr
(warnings and above) and the log file. Settings come from get_full_config().
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from relay.configs.paths import get_data_path


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure logging for the relay.

    Args:
        debug: Log debug records to the file
        log_file: Log file path; defaults to $MCP_RELAY_DATA_PATH/relay.log

    Returns:
        Root logger for the relay
    """
    log_path = Path(log_file).expanduser() if log_file else get_data_path() / "relay.log"
    log_path.parent.mkdir(parents=True, exist_ok=True)

    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logger = logging.getLogger("mcp_relay")
    logger.setLevel(level)
    logger.propagate = False

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    stderr_handler.setLevel(logging.WARNING)
    logger.addHandler(stderr_handler)

    file_handler = logging.FileHandler(log_path)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


def get_logger(component: str) -> logging.Logger:
    """Logger for a component, e.g. get_logger("bridge.session")."""
    return logging.getLogger(f"mcp_relay.{component}")
