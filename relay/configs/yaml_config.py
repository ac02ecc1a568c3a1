"""
Relay YAML Configuration

Loading and defaults for ~/.mcp-relay/config.yaml.
"""

from pathlib import Path

import yaml

from relay.configs.paths import ensure_data_dir, get_data_path
from relay.exceptions import ConfigurationError

# --- Default Config Template ---

DEFAULT_CONFIG_YAML = """\
# mcp-http-relay Configuration
# Every key is optional; command line options take precedence.

# Remote streamable-HTTP endpoint (used when no URL is passed on the command line)
# server_url: "http://localhost:8000/mcp"

# Timeouts in seconds
connect_timeout: 10
read_timeout: 300

# Extra headers sent with every request
headers:
  # Authorization: "Bearer <token>"

# Enable debug logging
debug: false
"""


def get_config_path() -> Path:
    """Get the path to config.yaml."""
    return get_data_path() / "config.yaml"


def load_yaml_config(path: Path | None = None) -> dict:
    """
    Load configuration from ~/.mcp-relay/config.yaml.

    Args:
        path: Explicit config file; defaults to get_config_path()

    Returns:
        Configuration dictionary (empty if file doesn't exist)

    Raises:
        ConfigurationError: File is not valid YAML or not a mapping
    """
    config_path = path or get_config_path()
    if not config_path.exists():
        return {}

    try:
        content = yaml.safe_load(config_path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {config_path}")
    return content


def create_default_config() -> bool:
    """
    Create default config.yaml if it doesn't exist.

    Returns:
        True if file was created, False if it already exists
    """
    config_path = get_config_path()
    if config_path.exists():
        return False

    ensure_data_dir()
    config_path.write_text(DEFAULT_CONFIG_YAML)
    return True
