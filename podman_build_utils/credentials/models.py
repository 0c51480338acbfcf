"""Identifiants de connexion a un registre d'images."""

from dataclasses import dataclass, field

from podman_build_utils.errors.exceptions import ConfigurationError


@dataclass(frozen=True)
class RegistryCredentials:
    """Registre, utilisateur et mot de passe pour `podman login`.

    Objet ephemere : il ne vit que le temps d'un appel de connexion.
    Le mot de passe est exclu de repr() pour ne jamais apparaitre
    dans une trace ou un journal.

    Attributes:
        registry: Hote du registre (ex: "quay.io").
        username: Nom d'utilisateur.
        password: Mot de passe ou jeton d'acces.
    """

    registry: str
    username: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        """Valide les champs apres initialisation."""
        for name in ("registry", "username", "password"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ConfigurationError(
                    f"Le champ '{name}' ne peut pas etre vide."
                )
