"""Fixtures partagées des tests."""

from typing import List, Optional, Sequence

import pytest

from podman_build_utils.commands.base import CommandExecutorDelegate
from podman_build_utils.errors.exceptions import ExecutionError


class RecordingDelegate(CommandExecutorDelegate):
    """Délégué factice : enregistre les appels et rejoue une sortie.

    Attributes:
        calls: Liste des (arguments, display, quiet) reçus.
        output: Lignes retournées à chaque appel.
        failure: Si renseigné, code retour simulé d'un échec.
        failure_output: Sortie jointe à l'erreur simulée.
    """

    def __init__(
        self,
        output: Optional[List[str]] = None,
        failure: Optional[int] = None,
        failure_output: Optional[List[str]] = None,
    ) -> None:
        self.calls: List[tuple] = []
        self.output = output or []
        self.failure = failure
        self.failure_output = failure_output or []

    @property
    def arguments(self) -> List[str]:
        """Arguments du dernier appel."""
        return self.calls[-1][0]

    def execute(
        self,
        arguments: Sequence[str],
        display: Optional[str] = None,
        quiet: bool = False,
    ) -> List[str]:
        self.calls.append((list(arguments), display, quiet))
        if self.failure is not None:
            command_line = " ".join(arguments)
            raise ExecutionError(
                f"Échec de la commande '{command_line}' "
                f"(code retour {self.failure}) :\n"
                + "\n".join(self.failure_output),
                command=arguments,
                return_code=self.failure,
                output=self.failure_output,
            )
        return list(self.output)


@pytest.fixture
def delegate() -> RecordingDelegate:
    """Délégué factice sans sortie."""
    return RecordingDelegate()


@pytest.fixture
def make_delegate():
    """Fabrique de délégués factices paramétrables."""
    return RecordingDelegate
