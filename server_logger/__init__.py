"""Logging client for an out-of-process log collector."""

from .errors import (
    ServerLoggerError,
    DestinationUnavailable,
    UnsupportedPlatform,
    TransportError,
    TransportCreationFailed,
    ConnectionFailed,
    WriteFailed,
)
from .severity import Severity, Stream, StreamConfig, severity_to_string
from .interfaces import ILogger, ILocalChannel
from .adapters import UnixSocketChannel, NamedPipeChannel, default_channel
from .server_logger import ServerLogger

__all__ = [
    'ServerLogger',
    'Severity',
    'Stream',
    'StreamConfig',
    'severity_to_string',
    'ILogger',
    'ILocalChannel',
    'UnixSocketChannel',
    'NamedPipeChannel',
    'default_channel',
    'ServerLoggerError',
    'DestinationUnavailable',
    'UnsupportedPlatform',
    'TransportError',
    'TransportCreationFailed',
    'ConnectionFailed',
    'WriteFailed',
]
