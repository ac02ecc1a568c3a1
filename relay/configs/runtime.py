"""
Relay Runtime Configuration

Configuration merging logic.
Combines defaults, YAML config, environment variables and CLI overrides.
"""

import math
import os
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlparse

from relay.configs.constants import get_timeout
from relay.configs.yaml_config import load_yaml_config
from relay.exceptions import ConfigurationError, MissingConfigError

# --- Default Runtime Configuration ---

DEFAULT_CONFIG = {
    "server_url": None,
    "connect_timeout": get_timeout("http_connect"),
    "read_timeout": get_timeout("http_read"),
    "headers": {},
    "debug": False,
    "log_file": None,
}

# Environment variable -> config key
ENV_VARS = {
    "MCP_RELAY_URL": "server_url",
    "MCP_RELAY_CONNECT_TIMEOUT": "connect_timeout",
    "MCP_RELAY_READ_TIMEOUT": "read_timeout",
    "MCP_RELAY_DEBUG": "debug",
    "MCP_RELAY_LOG_FILE": "log_file",
}


@dataclass
class RelayConfig:
    """Resolved settings for one relay process."""

    server_url: str
    connect_timeout: float
    read_timeout: float
    headers: dict[str, str] = field(default_factory=dict)
    debug: bool = False
    log_file: Optional[str] = None

    @property
    def timeout(self) -> tuple[float, float]:
        """(connect, read) tuple in the form requests expects."""
        return (self.connect_timeout, self.read_timeout)


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).lower() in ("true", "1", "yes")


def _parse_timeout(key: str, value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid {key}: {value!r}") from e
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigurationError(f"Invalid {key}: must be a positive number, got {value!r}")
    return timeout


def _parse_headers(value: Any) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"Invalid headers: expected a mapping, got {type(value).__name__}")
    return {str(name): str(header) for name, header in value.items()}


def _validate_url(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"Invalid server URL: {url}")
    return url


def _env_overrides() -> dict:
    overrides = {}
    for env_var, key in ENV_VARS.items():
        value = os.environ.get(env_var)
        if value:
            overrides[key] = value
    return overrides


def get_full_config(**overrides: Any) -> RelayConfig:
    """
    Get the merged relay configuration.

    Priority (highest first):
    1. Keyword overrides (CLI options); None values are ignored
    2. MCP_RELAY_* environment variables
    3. config.yaml
    4. DEFAULT_CONFIG

    Headers are merged rather than replaced, with the same priority.

    Raises:
        MissingConfigError: No server URL in any source
        ConfigurationError: A value is malformed
    """
    yaml_config = load_yaml_config()
    env_config = _env_overrides()
    cli_config = {key: value for key, value in overrides.items() if value is not None}

    merged = dict(DEFAULT_CONFIG)
    headers: dict[str, str] = {}
    for source in (yaml_config, env_config, cli_config):
        headers.update(_parse_headers(source.get("headers")))
        merged.update({key: value for key, value in source.items() if key in DEFAULT_CONFIG})

    if not merged["server_url"]:
        raise MissingConfigError("No server URL configured")

    return RelayConfig(
        server_url=_validate_url(str(merged["server_url"])),
        connect_timeout=_parse_timeout("connect_timeout", merged["connect_timeout"]),
        read_timeout=_parse_timeout("read_timeout", merged["read_timeout"]),
        headers=headers,
        debug=_parse_bool(merged["debug"]),
        log_file=str(merged["log_file"]) if merged["log_file"] else None,
    )
