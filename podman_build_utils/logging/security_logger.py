"""Journal d'audit des opérations sensibles sur les registres.

Chaque authentification auprès d'un registre produit un événement
JSON structuré. Les événements ne transportent jamais de mot de passe :
seuls le registre et l'utilisateur sont tracés.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from podman_build_utils.logging.base import Logger


class SecurityEventType(StrEnum):
    """Types d'événements de sécurité traçables."""

    AUTH_SUCCESS = "auth.success"
    AUTH_FAILURE = "auth.failure"
    IMAGE_PUSH = "image.push"
    IMAGE_REMOVE = "image.remove"


@dataclass(frozen=True)
class SecurityEvent:
    """Événement de sécurité structuré.

    Attributes:
        event_type: Type d'événement (SecurityEventType).
        resource: Registre ou image concerné.
        details: Contexte additionnel, sans donnée secrète.
        severity: Niveau de sévérité (info, warning, error).
        user_id: Utilisateur du registre, si connu.
        timestamp: Horodatage ISO 8601 UTC (auto-généré).
    """

    event_type: SecurityEventType
    resource: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
    severity: str = "info"
    user_id: str | None = None
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )


class SecurityLogger:
    """Sérialise les SecurityEvent en JSON vers un Logger injecté.

    Utilisation :
        audit = SecurityLogger(file_logger)
        audit.log_event(SecurityEvent(
            event_type=SecurityEventType.AUTH_SUCCESS,
            resource="quay.io",
            user_id="builder",
        ))
    """

    def __init__(self, logger: Logger) -> None:
        """Initialise le journal d'audit.

        Args:
            logger: Logger recevant les messages JSON.
        """
        self._logger = logger

    def log_event(self, event: SecurityEvent) -> None:
        """Enregistre un événement au niveau correspondant à sa sévérité.

        Args:
            event: Événement à journaliser.
        """
        payload: dict[str, Any] = {
            "security_event": str(event.event_type),
            "timestamp": event.timestamp,
            "resource": event.resource,
            "severity": event.severity,
            "details": event.details,
        }
        if event.user_id is not None:
            payload["user_id"] = event.user_id

        message = json.dumps(payload, ensure_ascii=False, default=str)

        if event.severity in ("error", "critical"):
            self._logger.log_error(message)
        elif event.severity == "warning":
            self._logger.log_warning(message)
        else:
            self._logger.log_info(message)
