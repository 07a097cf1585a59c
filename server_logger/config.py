"""Configuration management."""

import os


# Collector endpoints
DEFAULT_SOCKET_PATH = "/tmp/server_logger.sock"
DEFAULT_PIPE_NAME = r"\\.\pipe\server_logger"

_TRUE_VALUES = ("1", "true", "yes", "on")


def default_destination() -> str:
    """Destination from SERVER_LOGGER_DESTINATION, or the platform default."""
    destination = os.getenv("SERVER_LOGGER_DESTINATION", "")
    if destination:
        return destination

    return DEFAULT_PIPE_NAME if os.name == "nt" else DEFAULT_SOCKET_PATH


def strict_path() -> bool:
    """Whether oversized socket paths are rejected instead of truncated."""
    value = os.getenv("SERVER_LOGGER_STRICT_PATH", "")
    return value.strip().lower() in _TRUE_VALUES
