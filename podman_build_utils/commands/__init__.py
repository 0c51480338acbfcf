"""Module d'exécution des commandes podman.

Classes et fonctions disponibles :
    Command : Vecteur d'arguments immuable prêt à être exécuté.
    CommandExecutorDelegate : Interface abstraite des exécuteurs.
    SubprocessCommandExecutorDelegate : Exécuteur concret via subprocess.
    redact_password : Expurgation d'un mot de passe dans un texte.
"""

from podman_build_utils.commands.base import (
    Command,
    CommandExecutorDelegate,
)
from podman_build_utils.commands.redaction import (
    MASK,
    MASKED_PASSWORD_FLAG,
    PLACEHOLDER,
    redact_password,
)
from podman_build_utils.commands.runner import (
    SubprocessCommandExecutorDelegate,
)

__all__ = [
    # Structures de données
    "Command",
    # Interface abstraite
    "CommandExecutorDelegate",
    # Implémentation subprocess
    "SubprocessCommandExecutorDelegate",
    # Expurgation
    "MASK",
    "MASKED_PASSWORD_FLAG",
    "PLACEHOLDER",
    "redact_password",
]
