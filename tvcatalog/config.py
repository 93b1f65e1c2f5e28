"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe TVCATALOG_,
et peut optionnellement être fournie via un fichier .env.

Les backends de capture actifs remplacent les options de compilation de l'ancien serveur
(ENABLE_INPUT_DVB, ENABLE_INPUT_IPTV, ENABLE_INPUT_V4L).
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de tvcatalog/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

KNOWN_BACKENDS = ("dvb", "iptv", "v4l")


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe TVCATALOG_.
    Exemple : TVCATALOG_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="TVCATALOG_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Source de configuration des chaines et services
    config_file: Path = Field(default=Path("~/.tvcatalog/catalog.json"))

    # Catalogue
    default_group_name: str = Field(default="Uncategorized", min_length=1)
    tag_seed: Optional[int] = Field(default=None, ge=0, le=0xFFFFFFFF)

    # Backends de capture (ordre de sondage fixe : dvb, iptv, v4l)
    enabled_backends: list[str] = Field(default_factory=lambda: list(KNOWN_BACKENDS))
    dvb_muxes: list[str] = Field(default_factory=list)
    v4l_devices: list[str] = Field(default_factory=list)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/tvcatalog.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("config_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("enabled_backends")
    @classmethod
    def check_backends(cls, v: list[str]) -> list[str]:
        """Refuse les backends inconnus et normalise la casse."""
        normalized = [name.lower() for name in v]
        unknown = [name for name in normalized if name not in KNOWN_BACKENDS]
        if unknown:
            raise ValueError(f"Backends inconnus: {', '.join(unknown)}")
        return normalized

    def backend_enabled(self, name: str) -> bool:
        """Vérifie si un backend de capture est actif."""
        return name in self.enabled_backends
