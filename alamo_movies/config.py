"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe ALAMO_,
et peut optionnellement être fournie via un fichier .env.

Le répertoire du cache est passé explicitement au stockage par le container :
aucun code métier ne lit l'environnement.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from alamo_movies.adapters.api.calendar_client import DEFAULT_FEED_BASE_URL


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe ALAMO_.
    Exemple : ALAMO_DATA_DIR=/tmp/alamo ALAMO_WORKERS=4

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="ALAMO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Répertoire des données (le cache des calendriers est dans data_dir/db)
    data_dir: Path = Field(default=Path("~/.alamo"))

    # Flux distant
    feed_base_url: str = Field(default=DEFAULT_FEED_BASE_URL)
    http_timeout: Optional[float] = Field(default=None, gt=0)

    # Parallélisme des traitements en masse (None = nombre de CPU)
    workers: Optional[int] = Field(default=None, ge=1)

    # Logging (stderr + fichier JSON, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="WARNING")
    log_file: Path = Field(default=Path("~/.alamo/logs/alamo.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("data_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def db_dir(self) -> Path:
        """Répertoire des fichiers calendrier."""
        return self.data_dir / "db"
