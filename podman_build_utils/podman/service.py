"""Façade d'exécution des commandes podman.

PodmanExecutorService expose une méthode par opération (build, tag,
save, push, login, version, rmi). Chaque méthode extrait les champs
utiles de la configuration, construit la Command correspondante puis
l'exécute. Les erreurs de configuration et d'exécution remontent telles
quelles, sauf pour login dont les erreurs sont expurgées du mot de
passe avant d'être journalisées et relevées.
"""

from typing import List, Optional

from podman_build_utils.commands.base import CommandExecutorDelegate
from podman_build_utils.commands.redaction import redact_password
from podman_build_utils.credentials.models import RegistryCredentials
from podman_build_utils.errors.exceptions import (ExecutionError,
                                                  LoginError)
from podman_build_utils.logging.base import Logger
from podman_build_utils.logging.security_logger import (SecurityEvent,
                                                        SecurityEventType,
                                                        SecurityLogger)
from podman_build_utils.podman.builders import (build_command,
                                                login_command,
                                                push_command,
                                                remove_image_command,
                                                save_command,
                                                tag_command,
                                                version_command)
from podman_build_utils.podman.options import GlobalOptions, ImageBuildSpec


class PodmanExecutorService:
    """Exécute les opérations podman à partir d'une configuration typée.

    Les options globales sont fournies une fois à la construction et
    partagées en lecture seule par toutes les commandes. Chaque appel
    crée sa propre Command : le service peut être utilisé depuis
    plusieurs threads sans verrou.

    Attributes:
        global_options: Options racine de podman.
        delegate: Exécuteur des processus.
        logger: Logger optionnel.
        security_logger: Journal d'audit optionnel des connexions.
    """

    def __init__(
        self,
        global_options: GlobalOptions,
        delegate: CommandExecutorDelegate,
        logger: Optional[Logger] = None,
        security_logger: Optional[SecurityLogger] = None,
    ) -> None:
        """Initialise le service.

        Args:
            global_options: Options globales (TLS, stockage, URL,
                runtime).
            delegate: Exécuteur chargé de lancer podman.
            logger: Logger optionnel.
            security_logger: Journal d'audit optionnel.
        """
        self.global_options = global_options
        self.delegate = delegate
        self.logger = logger
        self.security_logger = security_logger

    def build(self, spec: ImageBuildSpec) -> List[str]:
        """Implémente `podman build`.

        Args:
            spec: Paramètres de construction de l'image.

        Returns:
            Lignes de sortie de la construction ; la dernière contient
            en général l'empreinte de l'image.

        Raises:
            ConfigurationError: Si le Containerfile ou le format manque.
            ExecutionError: Si la construction échoue.
        """
        return build_command(
            self.global_options, self.delegate, spec
        ).execute()

    def build_image_hash(self, spec: ImageBuildSpec) -> str:
        """Construit l'image et retourne son empreinte.

        Returns:
            Dernière ligne non vide de la sortie de `podman build`.

        Raises:
            ExecutionError: Si la construction échoue ou ne produit
                aucune sortie.
        """
        lines = [line for line in self.build(spec) if line.strip()]
        if not lines:
            raise ExecutionError(
                "podman build n'a produit aucune empreinte d'image."
            )
        return lines[-1].strip()

    def tag(self, image_hash: str, full_image_name: str) -> None:
        """Implémente `podman tag`.

        Args:
            image_hash: Empreinte produite par build.
            full_image_name: Nom complet cible de l'image.
        """
        tag_command(
            self.global_options, self.delegate, image_hash, full_image_name
        ).execute()

    def save(self, archive_name: str, full_image_name: str) -> None:
        """Implémente `podman save`.

        Le résultat est une archive tar contenant toutes les couches,
        pas un export du système de fichiers.

        Args:
            archive_name: Chemin de l'archive à produire.
            full_image_name: Image à sauvegarder.
        """
        save_command(
            self.global_options, self.delegate, archive_name,
            full_image_name
        ).execute()

    def push(self, full_image_name: str) -> None:
        """Implémente `podman push`.

        Args:
            full_image_name: Nom complet de l'image, registre compris.
        """
        push_command(
            self.global_options, self.delegate, full_image_name
        ).execute()
        self._audit(SecurityEvent(
            event_type=SecurityEventType.IMAGE_PUSH,
            resource=full_image_name,
        ))

    def login(self, registry: str, username: str, password: str) -> None:
        """Implémente `podman login`.

        En cas d'échec, podman recopie la commande complète dans son
        message. Le message est expurgé du mot de passe, journalisé
        puis relevé dans une LoginError neuve, sans chaînage vers
        l'erreur d'origine.

        Args:
            registry: Registre cible.
            username: Nom d'utilisateur.
            password: Mot de passe.

        Raises:
            ConfigurationError: Si un paramètre est vide.
            LoginError: Si la connexion échoue. Le message ne contient
                pas le mot de passe.
        """
        command = login_command(
            self.global_options, self.delegate, registry, username, password
        )
        try:
            command.execute()
        except ExecutionError as exc:
            message = redact_password(str(exc), password)
        else:
            self._audit(SecurityEvent(
                event_type=SecurityEventType.AUTH_SUCCESS,
                resource=registry,
                user_id=username,
            ))
            return

        # Levée hors du bloc except : __context__ reste vide
        if self.logger:
            self.logger.log_error(message)
        self._audit(SecurityEvent(
            event_type=SecurityEventType.AUTH_FAILURE,
            resource=registry,
            user_id=username,
            severity="warning",
        ))
        raise LoginError(message)

    def login_with(self, credentials: RegistryCredentials) -> None:
        """Implémente `podman login` à partir d'identifiants résolus.

        Args:
            credentials: Registre, utilisateur et mot de passe.
        """
        self.login(
            credentials.registry, credentials.username, credentials.password
        )

    def version(self) -> List[str]:
        """Implémente `podman version`.

        Returns:
            Lignes de sortie de la commande.
        """
        return version_command(self.global_options, self.delegate).execute()

    def remove_local_image(self, full_image_name: str) -> None:
        """Implémente `podman rmi`.

        Args:
            full_image_name: Image à retirer du stockage local.
        """
        remove_image_command(
            self.global_options, self.delegate, full_image_name
        ).execute()
        self._audit(SecurityEvent(
            event_type=SecurityEventType.IMAGE_REMOVE,
            resource=full_image_name,
        ))

    def _audit(self, event: SecurityEvent) -> None:
        if self.security_logger:
            self.security_logger.log_event(event)
