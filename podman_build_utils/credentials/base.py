"""Interface abstraite des sources de credentials."""

from abc import ABC, abstractmethod
from typing import Optional


class CredentialProvider(ABC):
    """Interface de lecture d'un credential depuis une source."""

    @abstractmethod
    def get(
        self,
        service: str,
        key: str,
    ) -> Optional[str]:
        """Retourne la valeur du credential ou None si absent.

        Args:
            service: Hote du registre.
            key: Nom de la cle (ex: "QUAY_IO_PASSWORD").

        Returns:
            Valeur du credential ou None si absent.
        """
        pass  # pragma: no cover

    @abstractmethod
    def is_available(self) -> bool:
        """Indique si ce provider est operationnel."""
        pass  # pragma: no cover

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Nom court de la source (ex: "env", "dotenv", "keyring")."""
        pass  # pragma: no cover
