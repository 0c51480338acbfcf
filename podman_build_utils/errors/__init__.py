"""Module de gestion des erreurs."""

from podman_build_utils.errors.base import ErrorHandler, ErrorHandlerChain
from podman_build_utils.errors.exceptions import (ApplicationError,
                                                  ConfigurationError,
                                                  FileConfigurationError,
                                                  ExecutionError,
                                                  LoginError)
from podman_build_utils.errors.console_handler import ConsoleErrorHandler
from podman_build_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "ExecutionError",
    "LoginError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
