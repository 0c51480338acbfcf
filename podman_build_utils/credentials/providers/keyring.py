"""Provider de credentials depuis le keyring systeme.

Le secret d'un registre est range sous le service portant le nom
de l'hote du registre, par exemple :

    keyring set quay.io QUAY_IO_PASSWORD
"""

from typing import Any, Optional

import keyring
from keyring.backends.fail import Keyring as FailKeyring
from keyring.errors import KeyringError

from podman_build_utils.credentials.base import CredentialProvider
from podman_build_utils.logging.base import Logger


class KeyringCredentialProvider(CredentialProvider):
    """Lit les credentials via le keyring systeme (Secret Service, etc.).

    Attributes:
        _logger: Logger optionnel.
        _backend: Backend keyring injecte (pour tests unitaires).
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        keyring_backend: Optional[Any] = None,
    ) -> None:
        """Initialise le provider keyring.

        Args:
            logger: Logger optionnel (injection de dependance).
            keyring_backend: Backend optionnel exposant get_password.
                Si None, le keyring par defaut du systeme est utilise.
        """
        self._logger = logger
        self._backend = keyring_backend

    def _get_keyring(self) -> Any:
        if self._backend is not None:
            return self._backend
        return keyring.get_keyring()

    def get(
        self,
        service: str,
        key: str,
    ) -> Optional[str]:
        """Lit un credential depuis le keyring systeme.

        Args:
            service: Hote du registre.
            key: Nom de la cle.

        Returns:
            Valeur du credential ou None si absent ou illisible.
        """
        if not self.is_available():
            return None
        try:
            value = self._get_keyring().get_password(service, key)
        except KeyringError as exc:
            if self._logger:
                self._logger.log_warning(
                    f"Lecture keyring impossible : service={service!r}, "
                    f"key={key!r} ({type(exc).__name__})"
                )
            return None
        return value if value else None

    def is_available(self) -> bool:
        """Indique si un backend keyring utilisable est configure."""
        return not isinstance(self._get_keyring(), FailKeyring)

    @property
    def source_name(self) -> str:
        return "keyring"
