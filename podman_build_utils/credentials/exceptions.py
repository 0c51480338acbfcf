"""Exceptions pour le module credentials.

Elles heritent de ConfigurationError : un secret absent ou illisible
empeche de construire la commande de connexion, rien n'est execute.
"""

from podman_build_utils.errors.exceptions import ConfigurationError


class CredentialError(ConfigurationError):
    """Exception de base pour toutes les erreurs credentials."""


class CredentialNotFoundError(CredentialError):
    """Levee quand un credential est absent de tous les providers."""
