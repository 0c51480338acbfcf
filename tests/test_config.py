"""Tests pour le module config."""

import json
from unittest.mock import MagicMock

import pytest

from podman_build_utils.config import (
    BuildSettings,
    ConfigLoader,
    FileConfigLoader,
    PodmanConfigLoader,
    PodmanSettings,
)
from podman_build_utils.errors import FileConfigurationError
from podman_build_utils.podman import ContainerFormat, TlsVerify

TOML_CONTENT = """
[podman]
tls_verify = false
root = "/var/lib/containers/alt"

[build]
container_file = "src/main/Containerfile"
format = "docker"
no_cache = true
pull_always = true
platform = "linux/arm64"

[build.args]
ZULU = "z"
ALPHA = "a"
"""


class TestFileConfigLoader:
    """Tests pour FileConfigLoader."""

    def test_load_toml(self, tmp_path):
        """Charge un fichier TOML."""
        path = tmp_path / "podman.toml"
        path.write_text(TOML_CONTENT, encoding="utf-8")
        config = FileConfigLoader().load(path)
        assert config["podman"]["root"] == "/var/lib/containers/alt"

    def test_load_json(self, tmp_path):
        """Charge un fichier JSON."""
        path = tmp_path / "podman.json"
        path.write_text(json.dumps({"build": {"no_cache": True}}))
        assert FileConfigLoader().load(path) == {"build": {"no_cache": True}}

    def test_fichier_absent(self, tmp_path):
        """Un fichier absent lève FileConfigurationError."""
        with pytest.raises(FileConfigurationError, match="non trouvé"):
            FileConfigLoader().load(tmp_path / "absent.toml")

    def test_extension_non_supportee(self, tmp_path):
        """Une extension inconnue lève FileConfigurationError."""
        path = tmp_path / "podman.yaml"
        path.write_text("build: {}")
        with pytest.raises(FileConfigurationError, match="Extension"):
            FileConfigLoader().load(path)

    def test_toml_invalide(self, tmp_path):
        """Un TOML mal formé lève FileConfigurationError."""
        path = tmp_path / "podman.toml"
        path.write_text("[build\nno_cache = ")
        with pytest.raises(FileConfigurationError, match="invalide"):
            FileConfigLoader().load(path)


class TestSchemas:
    """Tests des schémas Pydantic."""

    def test_podman_settings_tls_booleen(self):
        """tls_verify accepte un booléen TOML."""
        assert PodmanSettings(tls_verify=True).tls_verify is TlsVerify.TRUE
        assert PodmanSettings(tls_verify=False).tls_verify is TlsVerify.FALSE
        assert PodmanSettings().tls_verify is TlsVerify.NOT_SPECIFIED

    def test_build_settings_tri_etat_par_defaut(self):
        """Les champs tri-état absents restent à None."""
        spec = BuildSettings().to_build_spec()
        assert spec.layers is None
        assert spec.pull is None
        assert spec.pull_always is None
        assert spec.platform is None
        assert spec.container_file == "Containerfile"
        assert spec.format is ContainerFormat.OCI


class TestPodmanConfigLoader:
    """Tests pour PodmanConfigLoader."""

    def _loader(self, data):
        mock_loader = MagicMock(spec=ConfigLoader)
        mock_loader.load.return_value = data
        return PodmanConfigLoader("podman.toml", config_loader=mock_loader)

    def test_load_depuis_fichier(self, tmp_path):
        """Charge les deux sections d'un fichier TOML réel."""
        path = tmp_path / "podman.toml"
        path.write_text(TOML_CONTENT, encoding="utf-8")
        loader = PodmanConfigLoader(path)

        options = loader.load_global_options()
        assert options.tls_verify is TlsVerify.FALSE
        assert options.root == "/var/lib/containers/alt"

        spec = loader.load_build_spec()
        assert spec.container_file == "src/main/Containerfile"
        assert spec.format is ContainerFormat.DOCKER
        assert spec.no_cache is True
        assert spec.pull_always is True
        assert spec.pull is None
        assert spec.platform == "linux/arm64"
        assert list(spec.build_args.items()) == [("ZULU", "z"), ("ALPHA", "a")]

    def test_sections_absentes(self):
        """Sans section, les valeurs par défaut s'appliquent."""
        loader = self._loader({})
        assert loader.load_global_options().executable == "podman"
        assert loader.load_build_spec().no_cache is False

    def test_cle_inconnue_refusee(self):
        """Une clé inconnue lève FileConfigurationError."""
        loader = self._loader({"build": {"nocache": True}})
        with pytest.raises(FileConfigurationError, match="build"):
            loader.load_build_spec()

    def test_format_invalide(self):
        """Un format inconnu lève FileConfigurationError."""
        loader = self._loader({"build": {"format": "tarball"}})
        with pytest.raises(FileConfigurationError):
            loader.load_build_spec()

    def test_section_non_table(self):
        """Une section qui n'est pas une table est refusée."""
        loader = self._loader({"podman": "oops"})
        with pytest.raises(FileConfigurationError, match="table"):
            loader.load_global_options()

    def test_config_brute(self):
        """config expose le dictionnaire chargé."""
        loader = self._loader({"podman": {}})
        assert loader.config == {"podman": {}}
