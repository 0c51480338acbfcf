"""Configuration typée des commandes podman.

Ce module définit :
    - TlsVerify : vérification TLS explicite ou laissée à podman.
    - ContainerFormat : format de l'image produite par `podman build`.
    - GlobalOptions : options racine partagées par toutes les commandes.
    - ImageBuildSpec : paramètres d'une construction d'image.

Les champs tri-état utilisent None pour « non renseigné » : aucun
flag n'est alors émis et podman applique sa valeur par défaut.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import List, Mapping, Optional, Union


class TlsVerify(StrEnum):
    """Mode de vérification TLS transmis via --tls-verify."""

    NOT_SPECIFIED = "not_specified"
    TRUE = "true"
    FALSE = "false"

    def to_flag(self) -> Optional[str]:
        """Retourne le flag correspondant, ou None si non spécifié."""
        if self is TlsVerify.NOT_SPECIFIED:
            return None
        return f"--tls-verify={self.value}"


class ContainerFormat(StrEnum):
    """Format de manifeste et de métadonnées de l'image."""

    OCI = "oci"
    DOCKER = "docker"


@dataclass(frozen=True)
class GlobalOptions:
    """Options racine de podman, précédant toujours la sous-commande.

    Attributes:
        executable: Programme à lancer (nom ou chemin de podman).
        tls_verify: Vérification TLS pour build, push et login.
        root: Répertoire de stockage alternatif (--root).
        run_root: Répertoire d'état d'exécution (--runroot).
        url: URI de connexion à un service podman distant (--url).
        runtime: Chemin du runtime OCI (--runtime).
    """

    executable: str = "podman"
    tls_verify: TlsVerify = TlsVerify.NOT_SPECIFIED
    root: Optional[str] = None
    run_root: Optional[str] = None
    url: Optional[str] = None
    runtime: Optional[str] = None

    def root_flags(self) -> List[str]:
        """Retourne les flags racine renseignés, dans un ordre fixe."""
        flags = []
        for key, value in (
            ("--root", self.root),
            ("--runroot", self.run_root),
            ("--url", self.url),
            ("--runtime", self.runtime),
        ):
            if value:
                flags.append(f"{key}={value}")
        return flags


@dataclass(frozen=True)
class ImageBuildSpec:
    """Paramètres d'un `podman build`.

    Attributes:
        container_file: Chemin du Containerfile.
        format: Format de l'image (oci ou docker).
        no_cache: Désactive le cache des couches.
        squash: Fusionne les nouvelles couches en une seule.
        squash_all: Fusionne toutes les couches, base comprise.
        layers: Conserve les couches intermédiaires (None: défaut).
        pull: Tire l'image de base si absente (None: défaut).
        pull_always: Tire toujours l'image de base (None: défaut).
        platform: Plateforme cible, ex. "linux/arm64" (None: hôte).
        build_args: Arguments de construction, ordre d'insertion
            conservé.
    """

    container_file: Optional[str]
    format: Optional[Union[ContainerFormat, str]] = ContainerFormat.OCI
    no_cache: bool = False
    squash: bool = False
    squash_all: bool = False
    layers: Optional[bool] = None
    pull: Optional[bool] = None
    pull_always: Optional[bool] = None
    platform: Optional[str] = None
    build_args: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copie en lecture seule : l'appelant reste propriétaire de son dict
        object.__setattr__(
            self, "build_args", MappingProxyType(dict(self.build_args))
        )
