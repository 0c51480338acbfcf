#!/usr/bin/env python3
"""Tests unitaires pour le module errors."""

import unittest
from unittest.mock import MagicMock, patch

from podman_build_utils.errors.base import ErrorHandler, ErrorHandlerChain
from podman_build_utils.errors.exceptions import (ApplicationError,
                                                  ConfigurationError,
                                                  FileConfigurationError,
                                                  ExecutionError,
                                                  LoginError)
from podman_build_utils.errors.console_handler import ConsoleErrorHandler
from podman_build_utils.errors.logger_handler import LoggerErrorHandler


class TestExceptions(unittest.TestCase):
    """Tests de la hiérarchie d'exceptions."""

    def test_hierarchie(self):
        """LoginError spécialise ExecutionError, elle-même ApplicationError."""
        self.assertTrue(issubclass(LoginError, ExecutionError))
        self.assertTrue(issubclass(ExecutionError, ApplicationError))
        self.assertTrue(issubclass(FileConfigurationError, ConfigurationError))
        self.assertFalse(issubclass(ConfigurationError, ExecutionError))

    def test_execution_error_contexte(self):
        """ExecutionError conserve commande, code et sortie."""
        error = ExecutionError(
            "échec", command=["podman", "push", "x"], return_code=125,
            output=["denied"],
        )
        self.assertEqual(error.command, ("podman", "push", "x"))
        self.assertEqual(error.return_code, 125)
        self.assertEqual(error.output, ("denied",))
        self.assertEqual(str(error), "échec")

    def test_login_error_sans_contexte(self):
        """LoginError ne transporte que son message."""
        error = LoginError("login -p=**********")
        self.assertEqual(error.command, ())
        self.assertIsNone(error.return_code)
        self.assertEqual(error.output, ())


class TestConsoleErrorHandler(unittest.TestCase):
    """Tests pour ConsoleErrorHandler."""

    def setUp(self):
        self.handler = ConsoleErrorHandler()

    @patch("builtins.print")
    def test_handle_login_error(self, mock_print):
        """Vérifie le message pour LoginError."""
        self.handler.handle(LoginError("connexion refusée"))
        mock_print.assert_any_call("\n🛑 LoginError: connexion refusée")
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez le registre, l'utilisateur "
            "et le mot de passe."
        )

    @patch("builtins.print")
    def test_handle_execution_error(self, mock_print):
        """Vérifie le message pour ExecutionError."""
        self.handler.handle(ExecutionError("build échoué"))
        mock_print.assert_any_call(
            "\n🔧 Solution : Consultez la sortie de podman ci-dessus."
        )

    @patch("builtins.print")
    def test_handle_configuration_error(self, mock_print):
        """FileConfigurationError hérite du conseil de ConfigurationError."""
        self.handler.handle(FileConfigurationError("fichier invalide"))
        mock_print.assert_any_call(
            "\n🔧 Solution : Vérifiez votre fichier de configuration."
        )

    @patch("builtins.print")
    def test_solution_personnalisee(self, mock_print):
        """Un conseil fourni à l'instanciation est prioritaire."""
        handler = ConsoleErrorHandler(
            solutions={ExecutionError: "Relancez avec --log-level=debug."}
        )
        handler.handle(ExecutionError("push échoué"))
        mock_print.assert_any_call(
            "\n🔧 Solution : Relancez avec --log-level=debug."
        )

    @patch("builtins.print")
    def test_handle_unknown_error(self, mock_print):
        """Vérifie le traitement d'une erreur inattendue."""
        self.handler.handle(RuntimeError("crash"))
        mock_print.assert_any_call("\n💥 Erreur inattendue: crash")
        mock_print.assert_any_call("Type: RuntimeError")


class TestLoggerErrorHandler(unittest.TestCase):
    """Tests pour LoggerErrorHandler."""

    def setUp(self):
        self.mock_logger = MagicMock()
        self.handler = LoggerErrorHandler(self.mock_logger, output_tail=2)

    def test_handle_known_error(self):
        """Vérifie le log d'une erreur connue."""
        self.handler.handle(ConfigurationError("format absent"))
        self.mock_logger.log_error.assert_called_once_with(
            "ConfigurationError: format absent"
        )

    def test_handle_execution_error_avec_sortie(self):
        """Les dernières lignes de sortie sont journalisées."""
        error = ExecutionError("échec", output=["l1", "l2", "l3"])
        self.handler.handle(error)
        messages = [c.args[0] for c in self.mock_logger.log_error.call_args_list]
        self.assertEqual(messages, ["ExecutionError: échec", "  | l2", "  | l3"])

    def test_handle_unknown_error(self):
        """Vérifie le log d'une erreur inattendue."""
        self.handler.handle(ValueError("inattendu"))
        self.mock_logger.log_error.assert_called_once_with(
            "Erreur inattendue: ValueError: inattendu"
        )


class TestErrorHandlerChain(unittest.TestCase):
    """Tests pour ErrorHandlerChain."""

    def test_diffusion_a_tous_les_handlers(self):
        """Chaque handler reçoit l'erreur, dans l'ordre d'ajout."""
        first = MagicMock(spec=ErrorHandler)
        second = MagicMock(spec=ErrorHandler)
        chain = ErrorHandlerChain().add_handler(first).add_handler(second)
        error = ExecutionError("boom")
        chain.handle(error)
        first.handle.assert_called_once_with(error)
        second.handle.assert_called_once_with(error)

    @patch("sys.exit")
    def test_handle_and_exit(self, mock_exit):
        """handle_and_exit termine avec le code fourni."""
        chain = ErrorHandlerChain()
        chain.handle_and_exit(LoginError("refusé"), exit_code=3)
        mock_exit.assert_called_once_with(3)


if __name__ == "__main__":
    unittest.main()
