"""Chargement de fichiers de configuration TOML ou JSON."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from podman_build_utils.errors.exceptions import FileConfigurationError

M = TypeVar("M", bound=BaseModel)


class ConfigLoader(ABC):
    """
    Interface abstraite pour le chargement de configuration.

    Permet l'injection de dépendance et la substitution par un mock
    dans les tests.
    """

    @abstractmethod
    def load(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Charge un fichier de configuration.

        Args:
            config_path: Chemin vers le fichier de configuration

        Returns:
            Dictionnaire de configuration

        Raises:
            FileConfigurationError: Si le fichier est absent, illisible
                ou d'un format non supporté
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Chargeur de configuration depuis fichiers.

    Supporte TOML et JSON, détectés par l'extension du fichier.
    """

    def load(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(config_path)

        if not path.exists():
            raise FileConfigurationError(
                f"Fichier de configuration non trouvé: {path}"
            )

        suffix = path.suffix.lower()
        try:
            if suffix == ".toml":
                with open(path, "rb") as f:
                    return tomllib.load(f)
            if suffix == ".json":
                with open(path, "r", encoding="utf-8") as f:
                    return json.load(f)
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise FileConfigurationError(
                f"Fichier de configuration invalide {path}: {e}"
            ) from e

        raise FileConfigurationError(
            f"Extension non supportée: {suffix}. "
            "Utilisez .toml ou .json"
        )


def validate_section(
    data: Optional[Dict[str, Any]],
    schema: Type[M],
    section: str,
) -> M:
    """Valide une section de configuration via un modèle Pydantic.

    Args:
        data: Contenu brut de la section (None si absente).
        schema: Classe Pydantic BaseModel.
        section: Nom de la section, repris dans le message d'erreur.

    Returns:
        Instance du modèle validé.

    Raises:
        FileConfigurationError: Si la section ne respecte pas le schéma.
    """
    try:
        return schema.model_validate(data or {})
    except ValidationError as e:
        raise FileConfigurationError(
            f"Section [{section}] invalide : {e}"
        ) from e
