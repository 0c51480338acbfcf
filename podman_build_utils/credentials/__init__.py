"""Resolution des identifiants de registre.

Chaine de priorite configurable :
    variables d'environnement -> fichier .env (python-dotenv)
    -> keyring systeme

Exemple d'utilisation :

    from podman_build_utils.credentials import (
        CredentialChain,
        resolve_registry_credentials,
    )

    chain = CredentialChain.default(dotenv_path=".env")
    credentials = resolve_registry_credentials(
        chain, "quay.io", "builder"
    )
    service.login_with(credentials)
"""

from podman_build_utils.credentials.base import CredentialProvider
from podman_build_utils.credentials.chain import (
    CredentialChain,
    password_key_for,
    resolve_registry_credentials,
)
from podman_build_utils.credentials.exceptions import (
    CredentialError,
    CredentialNotFoundError,
)
from podman_build_utils.credentials.models import RegistryCredentials
from podman_build_utils.credentials.providers import (
    DotEnvCredentialProvider,
    EnvCredentialProvider,
    KeyringCredentialProvider,
)

__all__ = [
    "CredentialProvider",
    "RegistryCredentials",
    "CredentialError",
    "CredentialNotFoundError",
    "EnvCredentialProvider",
    "DotEnvCredentialProvider",
    "KeyringCredentialProvider",
    "CredentialChain",
    "password_key_for",
    "resolve_registry_credentials",
]
