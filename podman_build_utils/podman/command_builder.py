"""Constructeur fluent pour assembler des commandes podman.

Ce module fournit PodmanCommandBuilder, qui garantit l'ordre imposé
par la grammaire de podman : programme, options racine, sous-commande,
options de la sous-commande, puis arguments positionnels.

Example:
    Construction d'un `podman push` :

        from podman_build_utils.podman import PodmanCommandBuilder

        args = (
            PodmanCommandBuilder(GlobalOptions(root="/var/lib/alt"), "push")
            .with_option_if("--tls-verify", False)
            .with_args(["quay.io/acme/app:1.0"])
            .build()
        )
        # Résultat : ("podman", "--root=/var/lib/alt", "push",
        #             "--tls-verify=false", "quay.io/acme/app:1.0")
"""

from typing import List, Optional, Tuple, Union

from podman_build_utils.commands.base import Command, CommandExecutorDelegate
from podman_build_utils.errors.exceptions import ConfigurationError
from podman_build_utils.podman.options import GlobalOptions

OptionValue = Union[str, bool]


def _render(value: OptionValue) -> str:
    """Rend une valeur d'option telle que podman l'attend."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class PodmanCommandBuilder:
    """Constructeur fluent pour une sous-commande podman."""

    def __init__(
        self, global_options: GlobalOptions, operation: str
    ) -> None:
        """Initialise le constructeur.

        Les options racine de global_options sont consommées en
        premier : elles précèdent toujours la sous-commande.

        Args:
            global_options: Options racine partagées.
            operation: Sous-commande podman (ex: "build").

        Raises:
            ConfigurationError: Si le programme ou la sous-commande
                est vide.
        """
        if not global_options.executable or \
                not global_options.executable.strip():
            raise ConfigurationError("Le programme podman est requis.")
        if not operation or not operation.strip():
            raise ConfigurationError("La sous-commande est requise.")
        self._global_options = global_options
        self._operation = operation
        self._options: List[str] = []
        self._args: List[str] = []
        self._secrets: List[str] = []

    def with_flag(self, flag: str) -> "PodmanCommandBuilder":
        """Ajoute un flag simple (ex: '--no-cache')."""
        self._options.append(flag)
        return self

    def with_flag_if(
        self, flag: str, condition: bool
    ) -> "PodmanCommandBuilder":
        """Ajoute un flag simple seulement si condition est vraie."""
        if condition:
            self._options.append(flag)
        return self

    def with_option(
        self, key: str, value: OptionValue
    ) -> "PodmanCommandBuilder":
        """Ajoute une option au format 'clé=valeur'.

        Les booléens sont rendus en 'true' / 'false'.

        Args:
            key: Clé de l'option (ex: '--layers').
            value: Valeur de l'option.

        Returns:
            L'instance courante pour le chaînage.
        """
        self._options.append(f"{key}={_render(value)}")
        return self

    def with_option_if(
        self, key: str, value: Optional[OptionValue]
    ) -> "PodmanCommandBuilder":
        """Ajoute une option 'clé=valeur' si la valeur est renseignée.

        Une valeur None signifie « non renseigné » : aucun flag n'est
        émis. False est une valeur explicite et produit 'clé=false'.

        Args:
            key: Clé de l'option.
            value: Valeur tri-état de l'option.

        Returns:
            L'instance courante pour le chaînage.
        """
        if value is not None:
            self.with_option(key, value)
        return self

    def with_separate_option(
        self, key: str, value: str
    ) -> "PodmanCommandBuilder":
        """Ajoute une option dont la valeur est un argument distinct.

        Produit ['clé', 'valeur'] (ex: '--format', 'oci').
        """
        self._options.extend([key, value])
        return self

    def with_tls_verify(self) -> "PodmanCommandBuilder":
        """Ajoute --tls-verify si les options globales le précisent."""
        flag = self._global_options.tls_verify.to_flag()
        if flag:
            self._options.append(flag)
        return self

    def with_args(self, args: List[str]) -> "PodmanCommandBuilder":
        """Ajoute les arguments positionnels finaux."""
        self._args.extend(args)
        return self

    def with_secret(self, secret: str) -> "PodmanCommandBuilder":
        """Déclare une valeur à masquer dans les journaux."""
        self._secrets.append(secret)
        return self

    def build(self) -> Tuple[str, ...]:
        """Retourne le vecteur d'arguments complet.

        Returns:
            Programme, options racine, sous-commande, options puis
            arguments positionnels.
        """
        return tuple(
            [self._global_options.executable]
            + self._global_options.root_flags()
            + [self._operation]
            + self._options
            + self._args
        )

    def to_command(self, delegate: CommandExecutorDelegate) -> Command:
        """Fige le vecteur d'arguments dans une Command immuable.

        Args:
            delegate: Exécuteur associé à la commande.

        Returns:
            Command prête à être exécutée.
        """
        return Command(
            operation=self._operation,
            arguments=self.build(),
            delegate=delegate,
            secrets=tuple(self._secrets),
        )
