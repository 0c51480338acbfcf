"""Module de configuration."""

from podman_build_utils.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    validate_section,
)
from podman_build_utils.config.podman_loader import PodmanConfigLoader
from podman_build_utils.config.schema import BuildSettings, PodmanSettings

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "validate_section",
    "PodmanConfigLoader",
    "PodmanSettings",
    "BuildSettings",
]
