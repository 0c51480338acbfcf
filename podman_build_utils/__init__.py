"""
Podman Build Utils - Pilotage de podman depuis une configuration typée.

Modules disponibles:
- podman: Configuration typée, constructeurs de commandes et façade
  PodmanExecutorService (build, tag, save, push, login, version, rmi)
- commands: Command, délégué d'exécution subprocess, expurgation des
  mots de passe
- config: Chargement TOML/JSON validé par Pydantic
- credentials: Résolution des identifiants de registre (env, .env,
  keyring)
- errors: Exceptions et handlers d'erreurs
- logging: Gestion des logs (Logger, FileLogger, SecurityLogger)
"""

__version__ = "1.0.0"

from podman_build_utils.logging import (
    Logger,
    FileLogger,
    SecurityLogger,
)
from podman_build_utils.errors import (
    ApplicationError,
    ConfigurationError,
    FileConfigurationError,
    ExecutionError,
    LoginError,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from podman_build_utils.commands import (
    Command,
    CommandExecutorDelegate,
    SubprocessCommandExecutorDelegate,
    redact_password,
)
from podman_build_utils.podman import (
    ContainerFormat,
    GlobalOptions,
    ImageBuildSpec,
    TlsVerify,
    PodmanExecutorService,
)
from podman_build_utils.config import PodmanConfigLoader
from podman_build_utils.credentials import (
    CredentialChain,
    RegistryCredentials,
    resolve_registry_credentials,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    "SecurityLogger",
    # Errors
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "ExecutionError",
    "LoginError",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Commands
    "Command",
    "CommandExecutorDelegate",
    "SubprocessCommandExecutorDelegate",
    "redact_password",
    # Podman
    "ContainerFormat",
    "GlobalOptions",
    "ImageBuildSpec",
    "TlsVerify",
    "PodmanExecutorService",
    # Config
    "PodmanConfigLoader",
    # Credentials
    "CredentialChain",
    "RegistryCredentials",
    "resolve_registry_credentials",
]
