"""Logging interface (adapter pattern)."""

from typing import Protocol

from ..severity import Severity


class ILogger(Protocol):
    """Interface for log output."""

    def log(self, message: str, severity: Severity) -> "ILogger":
        """Write log entry, return self for chaining."""
        ...
