"""Named pipe adapter (Windows collectors)."""

import errno
import os
import sys

from ..errors import ConnectionFailed, TransportCreationFailed, WriteFailed

# Write-only, no O_CREAT: the pipe must already exist
OPEN_FLAGS = os.O_WRONLY | getattr(os, "O_BINARY", 0)

# Errors that mean no handle could be allocated at all
_CREATION_ERRNOS = (errno.EMFILE, errno.ENFILE, errno.ENOMEM)


class NamedPipeChannel:
    """Adapter for existing named pipes, one handle per message."""

    def check_destination(self, destination: str) -> None:
        """Pipe existence is only known on open."""
        return

    def send(self, destination: str, payload: bytes) -> None:
        """Open pipe for write, write payload, close handle."""
        try:
            fd = os.open(destination, OPEN_FLAGS)
        except OSError as e:
            print(
                f"ERROR: failed to open pipe {destination}: {e}",
                file=sys.stderr
            )
            if e.errno in _CREATION_ERRNOS:
                raise TransportCreationFailed(destination, e) from e
            raise ConnectionFailed(destination, e) from e

        try:
            view = memoryview(payload)
            while view:
                try:
                    written = os.write(fd, view)
                except OSError as e:
                    print(
                        f"ERROR: write to pipe {destination} failed: {e}",
                        file=sys.stderr
                    )
                    raise WriteFailed(destination, e) from e

                if written <= 0:
                    print(
                        f"ERROR: pipe {destination} accepted no data",
                        file=sys.stderr
                    )
                    raise WriteFailed(destination)
                view = view[written:]
        finally:
            os.close(fd)
