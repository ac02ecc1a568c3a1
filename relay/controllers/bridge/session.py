"""
Session Bridge

Forwards one JSON-RPC line to the remote streamable-HTTP endpoint and
normalizes the three reply shapes (accepted, JSON body, event stream)
into a single optional text result.

The Mcp-Session-Id issued by the server is captured from every response and
replayed on every later request until the server answers 404.
"""

import threading
from typing import Optional

import requests

from relay.configs import get_logger
from relay.configs.constants import (
    ACCEPT_HEADER,
    CONTENT_TYPE_EVENT_STREAM,
    CONTENT_TYPE_JSON,
    SESSION_HEADER,
    SSE_DATA_PREFIX,
    STATUS_ACCEPTED,
    STATUS_SESSION_EXPIRED,
)
from relay.exceptions import SessionExpiredError, TransportError
from relay.utils.http_client import (
    DEFAULT_TIMEOUT,
    create_session,
    http_post,
    iter_text_lines,
    read_text,
)

logger = get_logger("bridge.session")


def _valid_header_value(value: str) -> bool:
    """Header values must be visible ASCII (tabs and spaces allowed)."""
    return all(char == "\t" or " " <= char <= "~" for char in value)


class SessionBridge:
    """
    Stateful forwarder from single text messages to HTTP POSTs.

    Usage:
        bridge = SessionBridge("http://localhost:8000/mcp")
        reply = bridge.forward('{"jsonrpc":"2.0","id":1,"method":"ping"}')
    """

    def __init__(
        self,
        url: str,
        timeout: float | tuple[float, float] = DEFAULT_TIMEOUT,
        headers: Optional[dict[str, str]] = None,
        session: Optional[requests.Session] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.extra_headers = dict(headers or {})
        self._http = session or create_session()
        self._session_id: Optional[str] = None
        self._lock = threading.Lock()

    def _build_headers(self) -> dict[str, str]:
        headers = dict(self.extra_headers)
        headers["Content-Type"] = CONTENT_TYPE_JSON
        headers["Accept"] = ACCEPT_HEADER
        with self._lock:
            if self._session_id is not None:
                headers[SESSION_HEADER] = self._session_id
        return headers

    def _capture_session(self, response: requests.Response) -> None:
        session_id = response.headers.get(SESSION_HEADER)
        if session_id is None or not _valid_header_value(session_id):
            return
        with self._lock:
            if session_id != self._session_id:
                logger.debug(f"Session established: {session_id}")
            self._session_id = session_id

    def _expire_session(self) -> None:
        with self._lock:
            expired, self._session_id = self._session_id, None
        logger.warning(f"Session expired: {expired}")

    def forward(self, message: str) -> Optional[str]:
        """
        POST `message` verbatim and return whatever the server sent back.

        Args:
            message: One non-blank JSON-RPC request or notification

        Returns:
            Newline-joined JSON texts, or None when the server had nothing to say

        Raises:
            TransportError: HTTP exchange failed or the body could not be read
            SessionExpiredError: Server answered 404; session is already cleared
        """
        response = http_post(
            self.url,
            data=message,
            headers=self._build_headers(),
            timeout=self.timeout,
            stream=True,
            session=self._http,
        )
        try:
            # Adopt the header before looking at the status
            self._capture_session(response)

            if response.status_code == STATUS_SESSION_EXPIRED:
                self._expire_session()
                raise SessionExpiredError()

            if response.status_code == STATUS_ACCEPTED:
                logger.debug("202 Accepted")
                return None

            content_type = response.headers.get("Content-Type", "")
            if CONTENT_TYPE_EVENT_STREAM in content_type:
                return self._read_event_stream(response)

            body = read_text(response)
            logger.debug(f"{response.status_code} {content_type or 'no content type'}: {len(body)} chars")
            return body or None
        finally:
            response.close()

    def _read_event_stream(self, response: requests.Response) -> Optional[str]:
        payloads = []
        try:
            for line in iter_text_lines(response):
                if line.startswith(SSE_DATA_PREFIX):
                    payload = line[len(SSE_DATA_PREFIX):]
                    if payload:
                        payloads.append(payload)
        except TransportError as e:
            # Messages already received are still delivered
            if not payloads:
                raise
            logger.warning(f"Event stream cut short after {len(payloads)} message(s): {e}")
            return "\n".join(payloads)

        logger.debug(f"Event stream closed after {len(payloads)} message(s)")
        if not payloads:
            return None
        return "\n".join(payloads)

    def close(self) -> None:
        """Release pooled connections."""
        self._http.close()
