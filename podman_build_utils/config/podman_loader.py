"""Chargeur de configuration podman typé."""

from pathlib import Path
from typing import Any, Dict

from podman_build_utils.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    validate_section,
)
from podman_build_utils.config.schema import BuildSettings, PodmanSettings
from podman_build_utils.errors.exceptions import FileConfigurationError
from podman_build_utils.podman.options import GlobalOptions, ImageBuildSpec


class PodmanConfigLoader:
    """Charge les sections [podman] et [build] d'un fichier.

    Example:
        >>> loader = PodmanConfigLoader("podman-build.toml")
        >>> service = PodmanExecutorService(
        ...     loader.load_global_options(), delegate
        ... )
        >>> service.build(loader.load_build_spec())

    Attributes:
        _config: Dictionnaire de configuration chargé depuis le fichier.
    """

    def __init__(
        self,
        config_path: str | Path,
        config_loader: ConfigLoader | None = None
    ) -> None:
        """Initialise le loader en chargeant le fichier de configuration.

        Args:
            config_path: Chemin vers le fichier (.toml ou .json).
            config_loader: Chargeur injectable. Si None, utilise
                FileConfigLoader.

        Raises:
            FileConfigurationError: Si le fichier est absent ou invalide.
        """
        loader = config_loader or FileConfigLoader()
        self._config: Dict[str, Any] = loader.load(config_path)

    @property
    def config(self) -> Dict[str, Any]:
        """Retourne le dictionnaire de configuration brut."""
        return self._config

    def _get_section(self, section: str) -> Dict[str, Any] | None:
        data = self._config.get(section)
        if data is not None and not isinstance(data, dict):
            raise FileConfigurationError(
                f"La section [{section}] doit être une table."
            )
        return data

    def load_global_options(self, section: str = "podman") -> GlobalOptions:
        """Retourne les options globales ; section absente = défauts."""
        settings = validate_section(
            self._get_section(section), PodmanSettings, section
        )
        return settings.to_global_options()

    def load_build_spec(self, section: str = "build") -> ImageBuildSpec:
        """Retourne les paramètres de construction de l'image."""
        settings = validate_section(
            self._get_section(section), BuildSettings, section
        )
        return settings.to_build_spec()
