"""Constructeurs des commandes podman, une fonction par opération.

Chaque fonction valide ses entrées, assemble le vecteur d'arguments
via PodmanCommandBuilder et retourne une Command immuable. Une entrée
requise absente lève ConfigurationError avant toute exécution.
"""

from typing import Optional

from podman_build_utils.commands.base import Command, CommandExecutorDelegate
from podman_build_utils.errors.exceptions import ConfigurationError
from podman_build_utils.podman.command_builder import PodmanCommandBuilder
from podman_build_utils.podman.options import GlobalOptions, ImageBuildSpec


def _require(value: Optional[object], name: str) -> str:
    """Vérifie qu'un paramètre texte est renseigné.

    Args:
        value: Valeur à contrôler.
        name: Nom du paramètre, repris dans le message d'erreur.

    Returns:
        La valeur sous forme de chaîne.

    Raises:
        ConfigurationError: Si la valeur est None, vide ou blanche.
    """
    if value is None or not str(value).strip():
        raise ConfigurationError(f"Le paramètre '{name}' est requis.")
    return str(value)


def build_command(
    options: GlobalOptions,
    delegate: CommandExecutorDelegate,
    spec: ImageBuildSpec,
) -> Command:
    """Assemble un `podman build`.

    Ordre produit : build, --tls-verify, --format <fmt>, --no-cache,
    --squash, --squash-all, --layers, --pull, --pull-always,
    --platform, --build-arg (ordre d'insertion), Containerfile.
    Seuls les flags explicitement demandés sont émis.

    Args:
        options: Options globales.
        delegate: Exécuteur de la commande.
        spec: Paramètres de construction.

    Returns:
        Command prête à être exécutée.

    Raises:
        ConfigurationError: Si le Containerfile ou le format est absent,
            ou si un argument de construction est invalide.
    """
    container_file = _require(spec.container_file, "container_file")
    image_format = _require(spec.format, "format")

    builder = (
        PodmanCommandBuilder(options, "build")
        .with_tls_verify()
        .with_separate_option("--format", image_format)
        .with_flag_if("--no-cache", spec.no_cache)
        .with_flag_if("--squash", spec.squash)
        .with_flag_if("--squash-all", spec.squash_all)
        .with_option_if("--layers", spec.layers)
        .with_option_if("--pull", spec.pull)
        .with_option_if("--pull-always", spec.pull_always)
        .with_option_if("--platform", spec.platform or None)
    )
    for key, value in spec.build_args.items():
        if not key or not key.strip():
            raise ConfigurationError(
                "Le nom d'un argument de construction est vide."
            )
        if value is None:
            raise ConfigurationError(
                f"L'argument de construction '{key}' n'a pas de valeur."
            )
        builder.with_option("--build-arg", f"{key}={value}")

    return builder.with_args([container_file]).to_command(delegate)


def tag_command(
    options: GlobalOptions,
    delegate: CommandExecutorDelegate,
    image_hash: Optional[str],
    full_image_name: Optional[str],
) -> Command:
    """Assemble `podman tag <hash> <nom complet>`."""
    return (
        PodmanCommandBuilder(options, "tag")
        .with_args([
            _require(image_hash, "image_hash"),
            _require(full_image_name, "full_image_name"),
        ])
        .to_command(delegate)
    )


def save_command(
    options: GlobalOptions,
    delegate: CommandExecutorDelegate,
    archive_name: Optional[str],
    full_image_name: Optional[str],
) -> Command:
    """Assemble `podman save -o <archive> <nom complet>`."""
    return (
        PodmanCommandBuilder(options, "save")
        .with_separate_option("-o", _require(archive_name, "archive_name"))
        .with_args([_require(full_image_name, "full_image_name")])
        .to_command(delegate)
    )


def push_command(
    options: GlobalOptions,
    delegate: CommandExecutorDelegate,
    full_image_name: Optional[str],
) -> Command:
    """Assemble `podman push <nom complet>`."""
    return (
        PodmanCommandBuilder(options, "push")
        .with_tls_verify()
        .with_args([_require(full_image_name, "full_image_name")])
        .to_command(delegate)
    )


def login_command(
    options: GlobalOptions,
    delegate: CommandExecutorDelegate,
    registry: Optional[str],
    username: Optional[str],
    password: Optional[str],
) -> Command:
    """Assemble `podman login <registre> -u <utilisateur> -p=<mot de passe>`.

    Le mot de passe figure en clair dans les arguments : il est
    déclaré comme secret pour être masqué dans la représentation de
    la commande et dans les journaux du délégué. L'expurgation des
    messages d'erreur reste à la charge de l'appelant.
    """
    secret = _require(password, "password")
    return (
        PodmanCommandBuilder(options, "login")
        .with_tls_verify()
        .with_args([
            _require(registry, "registry"),
            "-u",
            _require(username, "username"),
            f"-p={secret}",
        ])
        .with_secret(secret)
        .to_command(delegate)
    )


def version_command(
    options: GlobalOptions,
    delegate: CommandExecutorDelegate,
) -> Command:
    """Assemble `podman version`."""
    return PodmanCommandBuilder(options, "version").to_command(delegate)


def remove_image_command(
    options: GlobalOptions,
    delegate: CommandExecutorDelegate,
    full_image_name: Optional[str],
) -> Command:
    """Assemble `podman rmi <nom complet>`."""
    return (
        PodmanCommandBuilder(options, "rmi")
        .with_args([_require(full_image_name, "full_image_name")])
        .to_command(delegate)
    )
