"""Provider de credentials depuis un fichier .env.

Le fichier est lu via python-dotenv sans modifier os.environ :
les valeurs restent locales au provider.
"""

from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values

from podman_build_utils.credentials.base import CredentialProvider
from podman_build_utils.logging.base import Logger


class DotEnvCredentialProvider(CredentialProvider):
    """Lit les credentials d'un fichier .env.

    Attributes:
        _dotenv_path: Chemin vers le fichier .env.
        _logger: Logger optionnel.
        _values: Contenu du fichier, charge au premier acces.
    """

    def __init__(
        self,
        dotenv_path: Union[str, Path],
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialise le provider de fichier .env.

        Args:
            dotenv_path: Chemin vers le fichier .env.
            logger: Logger optionnel (injection de dependance).
        """
        self._dotenv_path = Path(dotenv_path)
        self._logger = logger
        self._values: Optional[Dict[str, Optional[str]]] = None

    def _load(self) -> Dict[str, Optional[str]]:
        """Charge le fichier .env une seule fois.

        Returns:
            Dictionnaire des variables du fichier, vide s'il est absent.
        """
        if self._values is None:
            if self._dotenv_path.exists():
                self._values = dict(dotenv_values(self._dotenv_path))
            else:
                if self._logger:
                    self._logger.log_warning(
                        f"Fichier .env introuvable : {self._dotenv_path}"
                    )
                self._values = {}
        return self._values

    def get(
        self,
        service: str,
        key: str,
    ) -> Optional[str]:
        """Lit la variable key (en majuscules) dans le fichier .env.

        Args:
            service: Hote du registre (non utilise).
            key: Nom de la variable.

        Returns:
            Valeur de la variable ou None.
        """
        value = self._load().get(key.upper())
        return value if value else None

    def is_available(self) -> bool:
        return self._dotenv_path.exists()

    @property
    def source_name(self) -> str:
        return "dotenv"
