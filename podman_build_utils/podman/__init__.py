"""Module des opérations podman.

Classes et fonctions disponibles :
    GlobalOptions, ImageBuildSpec, TlsVerify, ContainerFormat :
        configuration typée.
    PodmanCommandBuilder : constructeur fluent ordonné.
    build_command, tag_command, ... : un constructeur par opération.
    PodmanExecutorService : façade exposant une méthode par opération.
"""

from podman_build_utils.podman.options import (
    ContainerFormat,
    GlobalOptions,
    ImageBuildSpec,
    TlsVerify,
)
from podman_build_utils.podman.command_builder import PodmanCommandBuilder
from podman_build_utils.podman.builders import (
    build_command,
    login_command,
    push_command,
    remove_image_command,
    save_command,
    tag_command,
    version_command,
)
from podman_build_utils.podman.service import PodmanExecutorService

__all__ = [
    # Configuration
    "ContainerFormat",
    "GlobalOptions",
    "ImageBuildSpec",
    "TlsVerify",
    # Constructeurs
    "PodmanCommandBuilder",
    "build_command",
    "login_command",
    "push_command",
    "remove_image_command",
    "save_command",
    "tag_command",
    "version_command",
    # Façade
    "PodmanExecutorService",
]
