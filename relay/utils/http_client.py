"""
HTTP Transport Utilities

Thin wrapper around `requests` used by the session bridge. Every failure of
the HTTP exchange, including failures while draining a streamed body, is
surfaced as a TransportError subclass so callers only handle one family.

Usage:
    from relay.utils.http_client import http_post, iter_text_lines, read_text

    response = http_post(url, data=line, headers=headers, stream=True)
    try:
        body = read_text(response)
    finally:
        response.close()
"""

from typing import Iterator

import requests

from relay import __version__
from relay.configs.constants import get_timeout
from relay.exceptions import HTTPConnectionError, HTTPTimeoutError, TransportError

# Default (connect, read) timeout for HTTP requests (seconds)
DEFAULT_TIMEOUT = (get_timeout("http_connect"), get_timeout("http_read"))

USER_AGENT = f"mcp-http-relay/{__version__}"


def create_session() -> requests.Session:
    """Create a pooled session shared by all forwarded requests."""
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    return session


def http_post(
    url: str,
    data: bytes | str | None = None,
    headers: dict[str, str] | None = None,
    timeout: float | tuple[float, float] = DEFAULT_TIMEOUT,
    stream: bool = False,
    session: requests.Session | None = None,
) -> requests.Response:
    """
    Make a POST request, mapping transport failures to TransportError.

    The response status is not checked; callers decide what each status means.

    Args:
        url: Request URL
        data: Raw body; str bodies are sent UTF-8 encoded
        headers: Optional headers dict
        timeout: Seconds, or a (connect, read) tuple
        stream: Defer reading the body until it is iterated
        session: Pooled session to send through; a one-off request otherwise

    Returns:
        requests.Response object

    Raises:
        HTTPConnectionError: Connection failed
        HTTPTimeoutError: Request timed out
        TransportError: Any other failure to complete the exchange
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    sender = session.post if session is not None else requests.post
    try:
        return sender(url, data=data, headers=headers, timeout=timeout, stream=stream)
    except requests.exceptions.Timeout as e:
        raise HTTPTimeoutError(f"Request timed out: {e}") from e
    except requests.exceptions.ConnectionError as e:
        raise HTTPConnectionError(f"Connection failed: {e}") from e
    except requests.exceptions.RequestException as e:
        raise TransportError(str(e)) from e


def read_text(response: requests.Response) -> str:
    """
    Read the whole response body as UTF-8 text.

    Raises:
        TransportError: Body could not be read or is not valid UTF-8
    """
    try:
        content = response.content
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Failed to read response body: {e}") from e

    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise TransportError(f"Response body is not valid UTF-8: {e}") from e


def iter_text_lines(response: requests.Response) -> Iterator[str]:
    """
    Yield the response body line by line as it arrives.

    Line terminators are removed. Undecodable bytes are replaced.

    Raises:
        TransportError: The stream broke before it was fully read
    """
    try:
        for raw_line in response.iter_lines():
            yield raw_line.decode("utf-8", errors="replace")
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Event stream interrupted: {e}") from e
