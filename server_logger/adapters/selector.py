"""Platform selection of the local channel."""

import os
import socket
from typing import Optional

from .. import config
from ..errors import UnsupportedPlatform
from ..interfaces import ILocalChannel
from .named_pipe_adapter import NamedPipeChannel
from .unix_socket_adapter import UnixSocketChannel


def default_channel(strict: Optional[bool] = None) -> ILocalChannel:
    """Named pipes on Windows, Unix domain sockets elsewhere."""
    if os.name == "nt":
        return NamedPipeChannel()

    if not hasattr(socket, "AF_UNIX"):
        raise UnsupportedPlatform(f"no local channel for platform {os.name}")

    if strict is None:
        strict = config.strict_path()
    return UnixSocketChannel(strict=strict)
