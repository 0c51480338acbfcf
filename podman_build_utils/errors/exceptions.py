"""
Exceptions du paquet podman_build_utils.

Hiérarchie :
    ApplicationError
    ├── ConfigurationError          entrée invalide, aucune exécution
    │   └── FileConfigurationError  fichier de configuration invalide
    └── ExecutionError              échec signalé par l'exécuteur
        └── LoginError              message garanti sans mot de passe
"""

from typing import Optional, Sequence, Tuple


class ApplicationError(Exception):
    """Exception de base pour toutes les erreurs du paquet."""
    pass


class ConfigurationError(ApplicationError):
    """Paramètre requis absent ou invalide pour construire une commande."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration illisible ou non conforme au schéma."""
    pass


class ExecutionError(ApplicationError):
    """La commande n'a pas pu être lancée ou s'est terminée en erreur.

    Attributes:
        command: Vecteur d'arguments exécuté (programme en tête).
        return_code: Code de retour du processus, None si le processus
            n'a jamais démarré.
        output: Lignes de sortie capturées avant l'échec.
    """

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        return_code: Optional[int] = None,
        output: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self.command: Tuple[str, ...] = tuple(command)
        self.return_code = return_code
        self.output: Tuple[str, ...] = tuple(output)


class LoginError(ExecutionError):
    """Échec de connexion à un registre.

    Ne transporte que le message expurgé : ni la commande ni la sortie
    brute ne sont conservées.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
