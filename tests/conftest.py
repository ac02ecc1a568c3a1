"""
Pytest fixtures for relay tests.
"""

import io
import sys
from pathlib import Path
from typing import Iterator
from unittest.mock import MagicMock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

# Add project root to path for relay imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

SERVER_URL = "http://relay.test/mcp"


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the data dir at a temp dir and drop any MCP_RELAY_* settings."""
    for name in ("MCP_RELAY_URL", "MCP_RELAY_CONNECT_TIMEOUT", "MCP_RELAY_READ_TIMEOUT", "MCP_RELAY_DEBUG", "MCP_RELAY_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    data_path = tmp_path / "relay-data"
    monkeypatch.setenv("MCP_RELAY_DATA_PATH", str(data_path))
    return data_path


def make_response(
    status: int = 200,
    body: bytes | str = b"",
    headers: dict[str, str] | None = None,
    raw=None,
) -> requests.Response:
    """Build a real requests.Response over an in-memory body."""
    if isinstance(body, str):
        body = body.encode("utf-8")
    response = requests.Response()
    response.status_code = status
    response.headers = CaseInsensitiveDict(headers or {})
    response.raw = raw if raw is not None else io.BytesIO(body)
    response.url = SERVER_URL
    return response


class BrokenStream:
    """urllib3-like raw body that fails after the first chunk."""

    def __init__(self, first_chunk: bytes):
        self.first_chunk = first_chunk
        self.closed = False

    def stream(self, chunk_size, decode_content=True) -> Iterator[bytes]:
        from urllib3.exceptions import ProtocolError

        yield self.first_chunk
        raise ProtocolError("Connection broken: IncompleteRead")

    def close(self):
        self.closed = True


@pytest.fixture
def http_session() -> MagicMock:
    """Mocked requests.Session; set .post.return_value / .side_effect per test."""
    session = MagicMock(spec=requests.Session)
    session.post.return_value = make_response(202)
    return session


@pytest.fixture
def bridge(http_session):
    """SessionBridge wired to the mocked session."""
    from relay.controllers.bridge.session import SessionBridge

    return SessionBridge(SERVER_URL, session=http_session)


def sent_headers(http_session: MagicMock, call: int = -1) -> dict:
    """Headers passed to the nth session.post call."""
    return http_session.post.call_args_list[call].kwargs["headers"]


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Detach handlers added by setup_logging so later tests start clean."""
    yield
    import logging

    logger = logging.getLogger("mcp_relay")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
