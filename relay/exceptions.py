"""
Relay Exception Hierarchy

Centralized exception classes for structured error handling across the relay.
All relay-specific exceptions inherit from RelayError.

Usage:
    from relay.exceptions import ForwardError, SessionExpiredError

    try:
        bridge.forward(line)
    except ForwardError as e:
        logger.info(f"Forward failed: {e}")
"""


class RelayError(Exception):
    """Base exception for all relay errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(RelayError):
    """Error in relay configuration. Fatal at startup."""

    pass


class MissingConfigError(ConfigurationError):
    """Required configuration value is missing."""

    pass


# =============================================================================
# Forwarding Errors
# =============================================================================


class ForwardError(RelayError):
    """A single forwarded message failed. The relay keeps running."""

    pass


class TransportError(ForwardError):
    """The HTTP exchange with the remote server could not be completed."""

    pass


class HTTPConnectionError(TransportError):
    """Failed to connect to the remote server."""

    pass


class HTTPTimeoutError(TransportError):
    """Request to the remote server timed out."""

    pass


class SessionExpiredError(ForwardError):
    """Remote server answered 404; the held session has been dropped."""

    def __init__(self, message: str = "Session expired"):
        super().__init__(message)
