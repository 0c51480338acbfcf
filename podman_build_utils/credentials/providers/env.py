"""Provider de credentials depuis les variables d'environnement."""

import os
from typing import Optional

from podman_build_utils.credentials.base import CredentialProvider


class EnvCredentialProvider(CredentialProvider):
    """Lit les credentials depuis os.environ.

    La variable cherchee est le parametre key en majuscules :
    key="quay_io_password" -> os.environ.get("QUAY_IO_PASSWORD").
    """

    def get(
        self,
        service: str,
        key: str,
    ) -> Optional[str]:
        value = os.environ.get(key.upper())
        return value if value else None

    def is_available(self) -> bool:
        return True

    @property
    def source_name(self) -> str:
        return "env"
