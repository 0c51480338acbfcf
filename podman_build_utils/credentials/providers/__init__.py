"""Sources de credentials : environnement, fichier .env, keyring."""

from podman_build_utils.credentials.providers.dotenv import (
    DotEnvCredentialProvider,
)
from podman_build_utils.credentials.providers.env import (
    EnvCredentialProvider,
)
from podman_build_utils.credentials.providers.keyring import (
    KeyringCredentialProvider,
)

__all__ = [
    "EnvCredentialProvider",
    "DotEnvCredentialProvider",
    "KeyringCredentialProvider",
]
