"""
Relay Configuration Module

Re-exports commonly used functions for cleaner imports across the codebase.
"""

# Logging (most commonly used)
from relay.configs.logging import get_logger, setup_logging

# Paths
from relay.configs.paths import get_data_path, ensure_data_dir

# Constants
from relay.configs.constants import TIMEOUTS, get_timeout

# YAML config
from relay.configs.yaml_config import (
    DEFAULT_CONFIG_YAML,
    get_config_path,
    load_yaml_config,
    create_default_config,
)

# Runtime
from relay.configs.runtime import (
    DEFAULT_CONFIG,
    RelayConfig,
    get_full_config,
)

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Paths
    "get_data_path",
    "ensure_data_dir",
    # Constants
    "TIMEOUTS",
    "get_timeout",
    # YAML config
    "DEFAULT_CONFIG_YAML",
    "get_config_path",
    "load_yaml_config",
    "create_default_config",
    # Runtime
    "DEFAULT_CONFIG",
    "RelayConfig",
    "get_full_config",
]
