"""Local IPC channel interface (adapter pattern)."""

from typing import Protocol


class ILocalChannel(Protocol):
    """Interface for one-shot delivery to a local collector.

    Every ``send`` opens its own connection and closes it before
    returning, on success and on failure.
    """

    def check_destination(self, destination: str) -> None:
        """Raise DestinationUnavailable if destination is known missing."""
        ...

    def send(self, destination: str, payload: bytes) -> None:
        """Connect, write the whole payload, close."""
        ...
