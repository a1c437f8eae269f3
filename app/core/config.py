"""
➡️ But : Centraliser tous les paramètres configurables (port HTTP, connexion PostgreSQL, logs, CORS).

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from app.core.config import settings
print(settings.PORT)

Les valeurs sont lues une seule fois au démarrage du process (pas de rechargement à chaud).

🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "todo-notes-api"
    ENV: str = "dev"  # dev | prod | test
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]

    # -----------------------------
    # DB (PostgreSQL)
    # -----------------------------
    PG_HOST: str = "localhost"
    PG_USER: str = "postgres"
    PG_PASSWORD: str = ""
    PG_DATABASE: str = "postgres"
    PG_PORT: int = 5432
    PG_SSL: bool = True
    # False = on accepte les certificats auto-signés (sslmode=require)
    PG_SSL_REJECT_UNAUTHORIZED: bool = False

    # Si tu veux forcer une URL différente (ex: SQLite), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None
    POOL_SIZE: int = 10

    INIT_DB: bool = True              # create_all au démarrage
    CHECK_DB_ON_STARTUP: bool = True  # SELECT 1 au démarrage, résultat loggé

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    @property
    def pg_sslmode(self) -> str:
        if not self.PG_SSL:
            return "disable"
        return "verify-full" if self.PG_SSL_REJECT_UNAUTHORIZED else "require"

    def postgres_url(self) -> str:
        url = URL.create(
            "postgresql+psycopg2",
            username=self.PG_USER,
            password=self.PG_PASSWORD or None,
            host=self.PG_HOST,
            port=self.PG_PORT,
            database=self.PG_DATABASE,
            query={"sslmode": self.pg_sslmode},
        )
        return url.render_as_string(hide_password=False)

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        # DATABASE_URL par défaut depuis les variables PG_* si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", self.postgres_url())


# Instance globale importable partout
settings = Settings()
