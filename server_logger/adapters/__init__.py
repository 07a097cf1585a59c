"""Local channel adapters for the server logger."""

from .unix_socket_adapter import UnixSocketChannel
from .named_pipe_adapter import NamedPipeChannel
from .selector import default_channel

__all__ = [
    'UnixSocketChannel',
    'NamedPipeChannel',
    'default_channel',
]
