"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe SHOKOSYNC_,
et peut optionnellement être fournie via un fichier .env.

L'accès au serveur Shoko nécessite une clé API ou un nom d'utilisateur ;
sans l'un ou l'autre, les commandes qui interrogent le serveur sont désactivées.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe SHOKOSYNC_.
    Exemple : SHOKOSYNC_SHOKO_URL=http://nas:8111

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="SHOKOSYNC_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Serveur Shoko
    shoko_url: str = Field(default="http://localhost:8111")
    shoko_api_key: Optional[str] = Field(default=None)
    shoko_username: Optional[str] = Field(default=None)
    shoko_password: Optional[str] = Field(default=None)
    request_timeout: float = Field(default=30.0, gt=0)

    # Cache des réponses API
    cache_dir: Path = Field(default=Path("~/.cache/shokosync"))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/shokosync.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("shoko_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Supprime le / final de l'URL du serveur."""
        return v.rstrip("/")

    @property
    def shoko_enabled(self) -> bool:
        """Vérifie si l'accès au serveur Shoko est configuré."""
        return bool(self.shoko_api_key or self.shoko_username)
