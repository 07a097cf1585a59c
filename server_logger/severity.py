"""Severity levels and stream configuration types."""

from enum import IntEnum
from typing import Mapping, NamedTuple, Tuple, Union


class Severity(IntEnum):
    """Ordered log levels."""
    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5

    @classmethod
    def parse(cls, name: str) -> "Severity":
        """Look up a severity by case-insensitive name."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown severity: {name!r}") from None


class Stream(NamedTuple):
    """Output stream bound to one severity."""
    tag: str
    enabled: bool


StreamConfig = Mapping[Severity, Union[Stream, Tuple[str, bool]]]


def severity_to_string(severity: Severity) -> str:
    """Wire name of a severity (e.g. ``ERROR``)."""
    return Severity(severity).name
