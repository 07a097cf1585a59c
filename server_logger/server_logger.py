"""Logger that forwards each line to an out-of-process collector."""

import os
from datetime import datetime
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from . import config
from .adapters import default_channel
from .interfaces import ILocalChannel
from .severity import Severity, Stream, StreamConfig, severity_to_string

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_NO_STREAMS: Mapping[Severity, Stream] = MappingProxyType({})


class ServerLogger:
    """Logging client for a local collector (Unix socket or named pipe).

    Each enabled ``log`` call formats one line, opens a fresh connection
    through the channel, writes the line and closes the connection.
    Disabled or unconfigured severities return before any formatting or
    I/O. Stream configuration is frozen at construction.
    """

    def __init__(
        self,
        destination: Optional[str],
        streams: StreamConfig,
        channel: Optional[ILocalChannel] = None,
        pid_provider: Callable[[], int] = os.getpid,
        clock: Callable[[], datetime] = datetime.now
    ):
        if destination is None:
            destination = config.default_destination()
        if channel is None:
            channel = default_channel()

        channel.check_destination(destination)

        self._destination: Optional[str] = destination
        self._streams: Mapping[Severity, Stream] = MappingProxyType({
            Severity(severity): Stream(str(tag), bool(enabled))
            for severity, (tag, enabled) in streams.items()
        })
        self._channel = channel
        self._pid_provider = pid_provider
        self._clock = clock

    @property
    def destination(self) -> Optional[str]:
        """Collector address, None once moved from."""
        return self._destination

    @property
    def streams(self) -> Mapping[Severity, Stream]:
        return self._streams

    @property
    def moved(self) -> bool:
        return self._destination is None

    def is_enabled(self, severity: Severity) -> bool:
        """Gate check: configured and enabled."""
        stream = self._streams.get(severity)
        return stream is not None and stream.enabled

    def format_line(self, message: str, severity: Severity) -> str:
        """Build the wire line for one message."""
        timestamp = self._clock().strftime(TIMESTAMP_FORMAT)
        return (
            f"[{timestamp}] "
            f"[{severity_to_string(severity)}] "
            f"[PID:{self._pid_provider()}] "
            f"{message}\n"
        )

    def log(self, message: str, severity: Severity) -> "ServerLogger":
        """Send message to the collector if its stream is enabled."""
        if not self.is_enabled(severity):
            return self

        line = self.format_line(message, severity)
        self._channel.send(self._destination, line.encode("utf-8"))
        return self

    def trace(self, message: str) -> "ServerLogger":
        return self.log(message, Severity.TRACE)

    def debug(self, message: str) -> "ServerLogger":
        return self.log(message, Severity.DEBUG)

    def information(self, message: str) -> "ServerLogger":
        return self.log(message, Severity.INFORMATION)

    def warning(self, message: str) -> "ServerLogger":
        return self.log(message, Severity.WARNING)

    def error(self, message: str) -> "ServerLogger":
        return self.log(message, Severity.ERROR)

    def critical(self, message: str) -> "ServerLogger":
        return self.log(message, Severity.CRITICAL)

    def move(self) -> "ServerLogger":
        """Hand destination and streams to a new client.

        The source keeps no destination and no streams, so further
        ``log`` calls on it are gated no-ops.
        """
        target = ServerLogger.__new__(ServerLogger)
        target._destination = self._destination
        target._streams = self._streams
        target._channel = self._channel
        target._pid_provider = self._pid_provider
        target._clock = self._clock

        self._destination = None
        self._streams = _NO_STREAMS
        return target

    def __repr__(self) -> str:
        enabled = [s.name for s in Severity if self.is_enabled(s)]
        return (
            f"ServerLogger(destination={self._destination!r}, "
            f"enabled={enabled})"
        )
