"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, URL DB, préfixe API, logs, etc.)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from taskboard.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "Taskboard-API"
    ENV: str = "dev"  # dev | prod | test
    API_PREFIX: str = "/api"
    CORS_ALLOW_ORIGINS: List[str] = ["*"]  # En prod, mettre l'URL du front

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "tasks.db"  # fichier SQLite
    # Si tu veux forcer une URL différente (ex: MySQL), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None
    SEED_PATH: str = "taskboard/db/seed_data.yaml"

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None  # si défini : fichier taskboard.log en DEBUG

    # -----------------------------
    # Serveur (python -m taskboard.main)
    # -----------------------------
    HOST: str = "127.0.0.1"
    PORT: int = 8080

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")


# Instance globale importable partout
settings = Settings()
