"""Contrat d'exécution des commandes podman.

Ce module définit :
    - CommandExecutorDelegate : interface de l'exécuteur de processus.
    - Command : vecteur d'arguments immuable prêt à être exécuté.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from podman_build_utils.commands.redaction import redact_password


class CommandExecutorDelegate(ABC):
    """Interface pour l'exécution d'un vecteur d'arguments."""

    @abstractmethod
    def execute(
        self,
        arguments: Sequence[str],
        display: Optional[str] = None,
        quiet: bool = False,
    ) -> List[str]:
        """Exécute la commande et retourne sa sortie.

        Args:
            arguments: Vecteur d'arguments, programme en tête.
            display: Ligne de commande à utiliser dans les journaux
                (secrets masqués). Par défaut, les arguments joints.
            quiet: Si True, la sortie n'est pas journalisée ligne
                par ligne.

        Returns:
            Lignes de sortie, dans l'ordre d'émission.

        Raises:
            ExecutionError: Si le processus n'a pas pu être lancé ou
                s'est terminé avec un code non nul.
        """
        pass


@dataclass(frozen=True, repr=False)
class Command:
    """Commande podman entièrement assemblée.

    Attributes:
        operation: Sous-commande podman (ex: "build", "tag").
        arguments: Vecteur d'arguments complet, programme en tête.
        delegate: Exécuteur chargé de lancer le processus.
        secrets: Valeurs masquées dans toute représentation textuelle.
    """

    operation: str
    arguments: Tuple[str, ...]
    delegate: CommandExecutorDelegate = field(compare=False)
    secrets: Tuple[str, ...] = ()

    @property
    def display(self) -> str:
        """Ligne de commande lisible, secrets masqués."""
        line = " ".join(self.arguments)
        for secret in self.secrets:
            line = redact_password(line, secret)
        return line

    def execute(self) -> List[str]:
        """Exécute la commande via le délégué.

        Returns:
            Lignes de sortie du processus. La dernière porte en
            général le résultat principal (ex: l'empreinte de l'image).

        Raises:
            ExecutionError: Si le délégué signale un échec.
        """
        return self.delegate.execute(
            list(self.arguments),
            display=self.display,
            quiet=bool(self.secrets),
        )

    def __repr__(self) -> str:
        return f"Command(operation={self.operation!r}, {self.display!r})"
