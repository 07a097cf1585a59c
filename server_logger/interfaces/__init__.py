"""Interface definitions for server logger adapters."""

from .i_logger import ILogger
from .i_local_channel import ILocalChannel

__all__ = [
    'ILogger',
    'ILocalChannel',
]
