"""Schémas Pydantic des sections [podman] et [build].

Exemple de fichier TOML :

    [podman]
    tls_verify = false
    root = "/var/lib/containers/alt"

    [build]
    container_file = "Containerfile"
    format = "oci"
    no_cache = true
    platform = "linux/arm64"

    [build.args]
    VERSION = "1.2.3"
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from podman_build_utils.podman.options import (
    ContainerFormat,
    GlobalOptions,
    ImageBuildSpec,
    TlsVerify,
)


class PodmanSettings(BaseModel):
    """Section [podman] : options globales."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    executable: str = Field(default="podman", min_length=1)
    tls_verify: TlsVerify = TlsVerify.NOT_SPECIFIED
    root: Optional[str] = None
    run_root: Optional[str] = None
    url: Optional[str] = None
    runtime: Optional[str] = None

    @field_validator("tls_verify", mode="before")
    @classmethod
    def _accept_boolean(cls, value: object) -> object:
        """Accepte `tls_verify = true` en plus des valeurs de l'enum."""
        if isinstance(value, bool):
            return TlsVerify.TRUE if value else TlsVerify.FALSE
        return value

    def to_global_options(self) -> GlobalOptions:
        return GlobalOptions(
            executable=self.executable,
            tls_verify=self.tls_verify,
            root=self.root,
            run_root=self.run_root,
            url=self.url,
            runtime=self.runtime,
        )


class BuildSettings(BaseModel):
    """Section [build] : paramètres de `podman build`.

    Les champs tri-état absents du fichier restent à None et ne
    produisent aucun flag.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    container_file: str = Field(default="Containerfile", min_length=1)
    format: ContainerFormat = ContainerFormat.OCI
    no_cache: bool = False
    squash: bool = False
    squash_all: bool = False
    layers: Optional[bool] = None
    pull: Optional[bool] = None
    pull_always: Optional[bool] = None
    platform: Optional[str] = None
    args: Dict[str, str] = Field(default_factory=dict)

    def to_build_spec(self) -> ImageBuildSpec:
        return ImageBuildSpec(
            container_file=self.container_file,
            format=self.format,
            no_cache=self.no_cache,
            squash=self.squash,
            squash_all=self.squash_all,
            layers=self.layers,
            pull=self.pull,
            pull_always=self.pull_always,
            platform=self.platform,
            build_args=self.args,
        )
