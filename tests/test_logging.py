"""Tests pour le module logging."""

import json
from unittest.mock import MagicMock

from podman_build_utils.logging import (
    FileLogger,
    Logger,
    SecurityEvent,
    SecurityEventType,
    SecurityLogger,
)


class TestFileLogger:
    """Tests pour FileLogger."""

    def test_implements_logger_interface(self, tmp_path):
        """Vérifie que FileLogger implémente l'interface Logger."""
        logger = FileLogger(str(tmp_path / "test.log"))
        assert isinstance(logger, Logger)

    def test_niveaux(self, tmp_path):
        """Les messages info, warning et error sont écrits."""
        log_file = tmp_path / "niveaux.log"
        logger = FileLogger(str(log_file))

        logger.log_info("Info message")
        logger.log_warning("Warning message")
        logger.log_error("Error message")

        content = log_file.read_text(encoding="utf-8")
        assert "INFO - Info message" in content
        assert "WARNING - Warning message" in content
        assert "ERROR - Error message" in content

    def test_debug_filtre_par_defaut(self, tmp_path):
        """Le niveau par défaut INFO filtre les messages de diagnostic."""
        log_file = tmp_path / "debug.log"
        logger = FileLogger(str(log_file))
        logger.log_debug("détail")
        assert "détail" not in log_file.read_text(encoding="utf-8")

    def test_config_niveau_et_format(self, tmp_path):
        """La section logging fixe le niveau et le format."""
        log_file = tmp_path / "config.log"
        logger = FileLogger(
            str(log_file),
            config={"logging": {"level": "debug", "format": "%(message)s"}},
        )
        logger.log_debug("détail")
        assert log_file.read_text(encoding="utf-8") == "détail\n"

    def test_cree_le_repertoire(self, tmp_path):
        """Le répertoire du fichier de log est créé si besoin."""
        log_file = tmp_path / "logs" / "sub" / "app.log"
        FileLogger(str(log_file)).log_info("ok")
        assert log_file.exists()


class TestSecurityLogger:
    """Tests pour SecurityLogger."""

    def test_evenement_json(self):
        """L'événement est sérialisé en JSON au niveau info."""
        logger = MagicMock(spec=Logger)
        SecurityLogger(logger).log_event(SecurityEvent(
            event_type=SecurityEventType.AUTH_SUCCESS,
            resource="quay.io",
            user_id="bob",
        ))
        payload = json.loads(logger.log_info.call_args.args[0])
        assert payload["security_event"] == "auth.success"
        assert payload["resource"] == "quay.io"
        assert payload["user_id"] == "bob"

    def test_severite(self):
        """La sévérité choisit la méthode du logger."""
        logger = MagicMock(spec=Logger)
        security_logger = SecurityLogger(logger)
        security_logger.log_event(SecurityEvent(
            SecurityEventType.AUTH_FAILURE, severity="warning"))
        security_logger.log_event(SecurityEvent(
            SecurityEventType.AUTH_FAILURE, severity="error"))
        logger.log_warning.assert_called_once()
        logger.log_error.assert_called_once()

    def test_user_id_absent(self):
        """user_id n'est pas émis s'il n'est pas renseigné."""
        logger = MagicMock(spec=Logger)
        SecurityLogger(logger).log_event(
            SecurityEvent(SecurityEventType.IMAGE_PUSH, resource="img"))
        payload = json.loads(logger.log_info.call_args.args[0])
        assert "user_id" not in payload
