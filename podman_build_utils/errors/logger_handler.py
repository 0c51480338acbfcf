"""
    LoggerErrorHandler
"""
from podman_build_utils.errors.base import ErrorHandler
from podman_build_utils.errors.exceptions import (ApplicationError,
                                                  ExecutionError)
from podman_build_utils.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Enregistre les erreurs via le Logger injecté.

    Pour une ExecutionError, les dernières lignes de sortie capturées
    sont ajoutées au journal.
    """

    def __init__(self, logger: Logger, output_tail: int = 10) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
            output_tail: Nombre de lignes de sortie reprises.
        """
        self.logger = logger
        self.output_tail = output_tail

    def handle(self, error: Exception) -> None:
        """Log l'erreur.

        Args:
            error: L'exception à logger.
        """
        if not isinstance(error, ApplicationError):
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
            return

        self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        if isinstance(error, ExecutionError) and error.output:
            for line in error.output[-self.output_tail:]:
                self.logger.log_error(f"  | {line}")
