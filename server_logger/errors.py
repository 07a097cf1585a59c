"""Errors raised by the server logger."""

from typing import Optional


class ServerLoggerError(Exception):
    """Base server logger exception."""


class DestinationUnavailable(ServerLoggerError):
    """Raised when the destination does not exist at construction."""

    def __init__(self, destination: str):
        super().__init__(f"destination not available: {destination}")
        self.destination = destination


class UnsupportedPlatform(ServerLoggerError):
    """Raised when no local channel exists for this platform."""


class TransportError(ServerLoggerError):
    """Base class for failures while delivering one message."""

    action = "transport"

    def __init__(self, destination: str, reason: Optional[OSError] = None):
        detail = f": {reason}" if reason is not None else ""
        super().__init__(f"{self.action} failed for {destination}{detail}")
        self.destination = destination
        self.reason = reason


class TransportCreationFailed(TransportError):
    """Raised when the socket or pipe handle cannot be created."""

    action = "transport creation"


class ConnectionFailed(TransportError):
    """Raised when connecting to the collector fails."""

    action = "connection"


class WriteFailed(TransportError):
    """Raised when the message cannot be fully written."""

    action = "write"
