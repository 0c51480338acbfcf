"""Module de logging."""

from podman_build_utils.logging.base import Logger
from podman_build_utils.logging.file_logger import FileLogger
from podman_build_utils.logging.security_logger import (
    SecurityEvent,
    SecurityEventType,
    SecurityLogger,
)

__all__ = [
    "Logger",
    "FileLogger",
    "SecurityEvent",
    "SecurityEventType",
    "SecurityLogger",
]
