"""Chaine de priorite de providers et resolution des identifiants
de registre.

Ce module implemente le pattern Chain of Responsibility : les
providers sont interroges dans l'ordre jusqu'au premier qui connait
le credential demande.
"""

import re
from pathlib import Path
from typing import List, Optional, Union

from podman_build_utils.credentials.base import CredentialProvider
from podman_build_utils.credentials.exceptions import (
    CredentialNotFoundError,
)
from podman_build_utils.credentials.models import RegistryCredentials
from podman_build_utils.credentials.providers import (
    DotEnvCredentialProvider,
    EnvCredentialProvider,
    KeyringCredentialProvider,
)
from podman_build_utils.logging.base import Logger

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


class CredentialChain(CredentialProvider):
    """Parcourt une liste ordonnee de providers jusqu'au premier succes.

    Exemple :

        chain = CredentialChain([
            EnvCredentialProvider(),
            DotEnvCredentialProvider(".env"),
            KeyringCredentialProvider(),
        ])
        password = chain.get("quay.io", "QUAY_IO_PASSWORD")

    Attributes:
        _providers: Liste ordonnee de providers (priorite decroissante).
        _logger: Logger optionnel.
    """

    def __init__(
        self,
        providers: List[CredentialProvider],
        logger: Optional[Logger] = None,
    ) -> None:
        self._providers = providers
        self._logger = logger

    def get(
        self,
        service: str,
        key: str,
    ) -> Optional[str]:
        """Retourne le premier credential trouve dans la chaine.

        Les providers indisponibles sont ignores. Seule la source
        est journalisee, jamais la valeur.

        Args:
            service: Hote du registre.
            key: Nom de la cle.

        Returns:
            Valeur du credential ou None si absent de tous les
            providers.
        """
        for provider in self._providers:
            if not provider.is_available():
                continue
            value = provider.get(service, key)
            if value:
                if self._logger:
                    self._logger.log_info(
                        f"Credential trouve via "
                        f"{provider.source_name!r} : "
                        f"service={service!r}, key={key!r}"
                    )
                return value
        return None

    def is_available(self) -> bool:
        return any(p.is_available() for p in self._providers)

    @property
    def source_name(self) -> str:
        return "chain"

    @classmethod
    def default(
        cls,
        dotenv_path: Optional[Union[str, Path]] = None,
        logger: Optional[Logger] = None,
    ) -> "CredentialChain":
        """Cree la chaine standard env -> dotenv -> keyring.

        Args:
            dotenv_path: Chemin optionnel vers un fichier .env.
                Si None, le provider dotenv est omis de la chaine.
            logger: Logger optionnel partage entre les providers.

        Returns:
            Instance de CredentialChain.
        """
        providers: List[CredentialProvider] = [EnvCredentialProvider()]
        if dotenv_path is not None:
            providers.append(
                DotEnvCredentialProvider(dotenv_path, logger=logger)
            )
        providers.append(KeyringCredentialProvider(logger=logger))
        return cls(providers=providers, logger=logger)


def password_key_for(registry: str) -> str:
    """Nom de cle par defaut du mot de passe d'un registre.

    Example:
        >>> password_key_for("registry.example.com:5000")
        'REGISTRY_EXAMPLE_COM_5000_PASSWORD'
    """
    host = _NON_ALNUM.sub("_", registry).strip("_").upper()
    return f"{host}_PASSWORD"


def resolve_registry_credentials(
    provider: CredentialProvider,
    registry: str,
    username: str,
    key: Optional[str] = None,
) -> RegistryCredentials:
    """Construit les identifiants d'un registre a partir d'une source.

    Args:
        provider: Source du mot de passe (souvent une CredentialChain).
        registry: Hote du registre.
        username: Nom d'utilisateur.
        key: Nom de la cle du mot de passe. Par defaut,
            password_key_for(registry).

    Returns:
        Identifiants complets.

    Raises:
        CredentialNotFoundError: si aucun mot de passe n'est trouve.
        ConfigurationError: si registry ou username est vide.
    """
    lookup_key = key or password_key_for(registry)
    password = provider.get(registry, lookup_key)
    if password is None:
        raise CredentialNotFoundError(
            f"Mot de passe introuvable pour le registre {registry!r} "
            f"(cle {lookup_key!r})"
        )
    return RegistryCredentials(
        registry=registry,
        username=username,
        password=password,
    )
