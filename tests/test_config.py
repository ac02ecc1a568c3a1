"""
Tests for relay/configs

Covers:
- get_full_config source priority (defaults, config.yaml, env, overrides)
- Validation errors
- YAML loading and default config creation
- Logging setup
"""

import logging
from pathlib import Path

import pytest
import yaml

from relay.configs import (
    DEFAULT_CONFIG_YAML,
    create_default_config,
    get_config_path,
    get_full_config,
    get_logger,
    load_yaml_config,
    setup_logging,
)
from relay.exceptions import ConfigurationError, MissingConfigError


def write_config(content: str) -> Path:
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


class TestGetFullConfig:
    """Tests for merged configuration."""

    def test_defaults(self):
        """Test defaults apply when only the URL is given."""
        config = get_full_config(server_url="http://localhost:8000/mcp")

        assert config.server_url == "http://localhost:8000/mcp"
        assert config.timeout == (10.0, 300.0)
        assert config.headers == {}
        assert config.debug is False
        assert config.log_file is None

    def test_missing_url(self):
        """Test no URL in any source raises MissingConfigError."""
        with pytest.raises(MissingConfigError):
            get_full_config()

    def test_missing_url_is_configuration_error(self):
        """Test MissingConfigError is a fatal configuration error."""
        assert issubclass(MissingConfigError, ConfigurationError)

    @pytest.mark.parametrize("url", ["localhost:8000", "ftp://host/mcp", "http://"])
    def test_invalid_url(self, url):
        """Test URLs without an http(s) scheme and host are rejected."""
        with pytest.raises(ConfigurationError, match="Invalid server URL"):
            get_full_config(server_url=url)

    def test_env_overrides_yaml(self, monkeypatch):
        """Test MCP_RELAY_* env vars beat config.yaml."""
        write_config("server_url: http://yaml.test/mcp\nread_timeout: 30\n")
        monkeypatch.setenv("MCP_RELAY_URL", "http://env.test/mcp")
        monkeypatch.setenv("MCP_RELAY_DEBUG", "yes")

        config = get_full_config()

        assert config.server_url == "http://env.test/mcp"
        assert config.read_timeout == 30.0
        assert config.debug is True

    def test_overrides_beat_env(self, monkeypatch):
        """Test explicit overrides win; None overrides are ignored."""
        monkeypatch.setenv("MCP_RELAY_URL", "http://env.test/mcp")
        monkeypatch.setenv("MCP_RELAY_READ_TIMEOUT", "45")

        config = get_full_config(server_url="http://cli.test/mcp", read_timeout=None, connect_timeout=2)

        assert config.server_url == "http://cli.test/mcp"
        assert config.timeout == (2.0, 45.0)

    def test_headers_merged(self):
        """Test override headers are merged over config.yaml headers."""
        write_config(
            "server_url: http://yaml.test/mcp\n"
            "headers:\n"
            "  Authorization: Bearer yaml\n"
            "  X-Team: core\n"
        )

        config = get_full_config(headers={"Authorization": "Bearer cli"})

        assert config.headers == {"Authorization": "Bearer cli", "X-Team": "core"}

    def test_empty_headers_section(self):
        """Test a headers key with no entries is treated as empty."""
        write_config(DEFAULT_CONFIG_YAML + "server_url: http://yaml.test/mcp\n")

        assert get_full_config().headers == {}

    def test_invalid_timeout(self, monkeypatch):
        """Test a non-numeric timeout is a configuration error."""
        monkeypatch.setenv("MCP_RELAY_CONNECT_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError, match="connect_timeout"):
            get_full_config(server_url="http://localhost/mcp")

    def test_non_positive_timeout(self):
        """Test zero timeouts are rejected."""
        with pytest.raises(ConfigurationError, match="must be a positive number"):
            get_full_config(server_url="http://localhost/mcp", read_timeout=0)

    @pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
    def test_non_finite_timeout(self, monkeypatch, value):
        """Test nan and infinite timeouts from the environment are rejected."""
        monkeypatch.setenv("MCP_RELAY_READ_TIMEOUT", value)

        with pytest.raises(ConfigurationError, match="read_timeout"):
            get_full_config(server_url="http://localhost/mcp")


class TestYamlConfig:
    """Tests for config.yaml handling."""

    def test_missing_file_is_empty(self):
        """Test a missing config file yields an empty dict."""
        assert load_yaml_config() == {}

    def test_invalid_yaml(self):
        """Test malformed YAML raises ConfigurationError."""
        write_config("server_url: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml_config()

    def test_non_mapping(self):
        """Test a YAML list at top level is rejected."""
        write_config("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_yaml_config()

    def test_create_default_config(self, isolated_env):
        """Test the default config is written once and is valid YAML."""
        assert create_default_config() is True
        assert create_default_config() is False

        path = isolated_env / "config.yaml"
        assert path.read_text() == DEFAULT_CONFIG_YAML
        assert yaml.safe_load(path.read_text())["read_timeout"] == 300


class TestLogging:
    """Tests for setup_logging."""

    def test_logs_to_file_not_stdout(self, tmp_path, capsys):
        """Test info records go to the log file and never to stdout."""
        log_file = tmp_path / "logs" / "relay.log"
        setup_logging(debug=False, log_file=str(log_file))

        get_logger("test").info("hello file")
        get_logger("test").warning("hello stderr")
        for handler in logging.getLogger("mcp_relay").handlers:
            handler.flush()

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "hello stderr" in captured.err
        assert "hello file" not in captured.err
        assert "hello file" in log_file.read_text()

    def test_debug_level(self, tmp_path):
        """Test debug=True lowers the logger level."""
        logger = setup_logging(debug=True, log_file=str(tmp_path / "relay.log"))

        assert logger.level == logging.DEBUG

    def test_default_log_file_in_data_dir(self, isolated_env):
        """Test the log file defaults to the data directory."""
        setup_logging(debug=False)

        assert (isolated_env / "relay.log").exists()

    @pytest.mark.parametrize("debug, expected", [(True, True), (False, False)])
    def test_debug_records_reach_file_only_in_debug(self, tmp_path, debug, expected):
        """Test debug records are written to the file only when debug is on."""
        log_file = tmp_path / "relay.log"
        setup_logging(debug=debug, log_file=str(log_file))

        get_logger("test").debug("debug detail")
        for handler in logging.getLogger("mcp_relay").handlers:
            handler.flush()

        assert ("debug detail" in log_file.read_text()) is expected

    def test_log_file_home_expanded(self, tmp_path, monkeypatch):
        """Test a ~ in the configured log file is expanded."""
        monkeypatch.setenv("HOME", str(tmp_path))

        setup_logging(log_file="~/logs/relay.log")

        assert (tmp_path / "logs" / "relay.log").exists()
