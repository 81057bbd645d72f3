"""
Configuration du client via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe TVMAZE_,
et peut optionnellement etre fournie via un fichier .env.

L'API TVMaze est publique: aucune cle n'est necessaire.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tvmaze.utils.constants import BASE_URL, DEFAULT_TIMEOUT, USER_AGENT


class Settings(BaseSettings):
    """Parametres du client avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe TVMAZE_.
    Exemple : TVMAZE_USER_AGENT="MonApp/2.0"

    Les chemins sont automatiquement etendus (~ -> repertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="TVMAZE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API
    base_url: str = Field(default=BASE_URL)
    user_agent: str = Field(default=USER_AGENT)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    # Logging (stderr, fichier JSON optionnel avec rotation)
    log_level: str = Field(default="INFO")
    log_file: Optional[Path] = Field(default=None)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Etend ~ vers le repertoire home."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")
