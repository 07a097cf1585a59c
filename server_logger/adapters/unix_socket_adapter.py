"""Unix domain socket adapter (POSIX collectors)."""

import errno
import os
import socket
import sys

from ..errors import (
    ConnectionFailed,
    DestinationUnavailable,
    TransportCreationFailed,
    WriteFailed,
)

# sizeof(sun_path) minus the terminating NUL
MAX_PATH_LENGTH = 107 if sys.platform.startswith("linux") else 103


class UnixSocketChannel:
    """Adapter for AF_UNIX stream sockets, one connection per message."""

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._warned: set = set()

    def check_destination(self, destination: str) -> None:
        """Socket node must already exist (collector creates it)."""
        if not os.path.exists(destination):
            print(
                f"ERROR: server socket not available: {destination}",
                file=sys.stderr
            )
            raise DestinationUnavailable(destination)

    def socket_address(self, destination: str) -> bytes:
        """Encode destination as sun_path, truncating past the limit."""
        address = os.fsencode(destination)
        if len(address) <= MAX_PATH_LENGTH:
            return address

        if self.strict:
            print(
                f"ERROR: socket path too long ({len(address)} bytes): "
                f"{destination}",
                file=sys.stderr
            )
            raise ConnectionFailed(
                destination,
                OSError(errno.ENAMETOOLONG, "socket path too long")
            )

        if destination not in self._warned:
            self._warned.add(destination)
            print(
                f"WARN: socket path truncated to {MAX_PATH_LENGTH} bytes: "
                f"{destination}",
                file=sys.stderr
            )
        return address[:MAX_PATH_LENGTH]

    def send(self, destination: str, payload: bytes) -> None:
        """Connect, write payload, close."""
        address = self.socket_address(destination)

        try:
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
        except OSError as e:
            print(f"ERROR: socket creation failed: {e}", file=sys.stderr)
            raise TransportCreationFailed(destination, e) from e

        try:
            try:
                sock.connect(address)
            except OSError as e:
                print(
                    f"ERROR: connection to {destination} failed: {e}",
                    file=sys.stderr
                )
                raise ConnectionFailed(destination, e) from e

            try:
                sock.sendall(payload)
            except OSError as e:
                print(
                    f"ERROR: write to {destination} failed: {e}",
                    file=sys.stderr
                )
                raise WriteFailed(destination, e) from e
        finally:
            sock.close()
