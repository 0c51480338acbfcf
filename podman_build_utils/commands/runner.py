"""Exécuteur de commandes via subprocess.

Ce module fournit SubprocessCommandExecutorDelegate, l'implémentation
concrète de CommandExecutorDelegate. La sortie d'erreur est fusionnée
dans la sortie standard et lue ligne par ligne : chaque ligne est
journalisée au fil de l'eau puis retournée dans l'ordre d'émission.
La sortie est décodée en UTF-8 ; un octet invalide devient U+FFFD.

Example :

        from podman_build_utils import FileLogger
        from podman_build_utils.commands import (
            SubprocessCommandExecutorDelegate,
        )

        delegate = SubprocessCommandExecutorDelegate(
            logger=FileLogger("/var/log/podman-build.log"),
        )
        lines = delegate.execute(["podman", "version"])
"""

import os
import subprocess  # nosec B404
import threading
from typing import Dict, List, Optional, Sequence

from podman_build_utils.commands.base import CommandExecutorDelegate
from podman_build_utils.errors.exceptions import ExecutionError
from podman_build_utils.logging.base import Logger


class SubprocessCommandExecutorDelegate(CommandExecutorDelegate):
    """Lance les commandes podman dans un sous-processus.

    Le délégué est seul responsable de la durée de vie du processus :
    lecture des flux, collecte du code de retour et, si un timeout est
    configuré, arrêt forcé du processus.

    Attributes:
        _logger: Logger optionnel.
        _env: Variables d'environnement supplémentaires.
        _cwd: Répertoire de travail des processus.
        _timeout: Durée maximale d'une commande en secondes.
        _dry_run: Mode simulation.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        env: Optional[Dict[str, str]] = None,
        cwd: Optional[str] = None,
        timeout: Optional[float] = None,
        dry_run: bool = False,
    ) -> None:
        """Initialise le délégué.

        Args:
            logger: Logger optionnel pour la commande et sa sortie.
            env: Variables d'environnement fusionnées avec os.environ.
            cwd: Répertoire de travail.
            timeout: Timeout en secondes, None pour attendre
                indéfiniment.
            dry_run: Si True, journalise la commande sans l'exécuter.
        """
        self._logger = logger
        self._env = env
        self._cwd = cwd
        self._timeout = timeout
        self._dry_run = dry_run

    def _build_env(self) -> Optional[Dict[str, str]]:
        """Fusionne os.environ et l'environnement configuré.

        Returns:
            Environnement complet, ou None pour hériter d'os.environ.
        """
        if not self._env:
            return None
        merged = os.environ.copy()
        merged.update(self._env)
        return merged

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def execute(
        self,
        arguments: Sequence[str],
        display: Optional[str] = None,
        quiet: bool = False,
    ) -> List[str]:
        """Exécute la commande et capture sa sortie.

        Args:
            arguments: Vecteur d'arguments, programme en tête.
            display: Ligne journalisée à la place des arguments bruts.
            quiet: Si True, les lignes de sortie ne sont pas
                journalisées.

        Returns:
            Lignes de sortie (stdout et stderr fusionnés).

        Raises:
            ExecutionError: Si le lancement échoue, si le code de retour
                est non nul ou si le timeout est dépassé. Le message
                contient la ligne de commande complète et la sortie
                capturée.
        """
        command = list(arguments)
        command_line = " ".join(command)
        shown = display if display is not None else command_line

        if self._dry_run:
            self._log(f"[dry-run] {shown}")
            return []

        self._log(f"Exécution : {shown}")
        output: List[str] = []
        timed_out = threading.Event()

        try:
            with subprocess.Popen(  # nosec B603
                command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                encoding="utf-8",
                errors="replace",
                env=self._build_env(),
                cwd=self._cwd,
            ) as proc:
                watchdog = None
                if self._timeout is not None:
                    watchdog = threading.Timer(
                        self._timeout, self._kill, (proc, timed_out)
                    )
                    watchdog.start()
                try:
                    for line in proc.stdout:
                        stripped = line.rstrip("\n")
                        output.append(stripped)
                        if not quiet:
                            self._log(stripped)
                    return_code = proc.wait()
                finally:
                    if watchdog is not None:
                        watchdog.cancel()
        except OSError as exc:
            self._log_error(f"Lancement impossible : {shown}")
            raise ExecutionError(
                f"Impossible de lancer la commande '{command_line}' : "
                f"{exc}",
                command=command,
            ) from exc

        # Un watchdog déclenché après la fin normale du processus est ignoré
        if timed_out.is_set() and return_code != 0:
            self._log_error(
                f"Timeout après {self._timeout}s : {shown}"
            )
            raise ExecutionError(
                self._failure_message(
                    command_line,
                    f"interrompue après {self._timeout}s",
                    output,
                ),
                command=command,
                return_code=return_code,
                output=output,
            )

        if return_code != 0:
            self._log_error(f"Code retour {return_code} : {shown}")
            raise ExecutionError(
                self._failure_message(
                    command_line, f"code retour {return_code}", output
                ),
                command=command,
                return_code=return_code,
                output=output,
            )
        return output

    @staticmethod
    def _kill(
        proc: subprocess.Popen, timed_out: threading.Event
    ) -> None:
        """Arrête un processus ayant dépassé le timeout."""
        timed_out.set()
        proc.kill()

    @staticmethod
    def _failure_message(
        command_line: str, reason: str, output: List[str]
    ) -> str:
        message = f"Échec de la commande '{command_line}' ({reason})"
        if output:
            message += " :\n" + "\n".join(output)
        return message
