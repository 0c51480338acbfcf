"""
    ConsoleErrorHandler
"""
from podman_build_utils.errors.base import ErrorHandler
from podman_build_utils.errors.exceptions import (ApplicationError,
                                                  ConfigurationError,
                                                  ExecutionError,
                                                  LoginError)


class ConsoleErrorHandler(ErrorHandler):
    """Affiche les erreurs dans la console avec une piste de résolution.

    Les erreurs du paquet (ApplicationError) sont présentées avec
    leur type et un conseil adapté ; les autres sont signalées comme
    inattendues.
    """

    def __init__(
        self,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            solutions: Conseils supplémentaires par type d'exception,
                prioritaires sur les conseils par défaut.
        """
        self.solutions = solutions or {}

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console."""
        if isinstance(error, ApplicationError):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: ApplicationError) -> str:
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution
        if isinstance(error, LoginError):
            return "Vérifiez le registre, l'utilisateur et le mot de passe."
        if isinstance(error, ExecutionError):
            return "Consultez la sortie de podman ci-dessus."
        if isinstance(error, ConfigurationError):
            return "Vérifiez votre fichier de configuration."
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: ApplicationError) -> None:
        print(f"\n🛑 {type(error).__name__}: {str(error)}")
        print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
