"""
➡️ But : Construire le handle de base (engine + pool de connexions) et gérer les sessions.

build_engine(settings) : crée l'engine SQLAlchemy (PostgreSQL en prod, SQLite en test/dev).
Il est construit une seule fois par create_app() au démarrage et rangé dans app.state.engine.

init_db(engine) : crée les tables à partir des modèles SQLModel.

check_connection(engine) : ouvre une connexion et logge le résultat.

get_session() : dépendance FastAPI qui ouvre une session sur l'engine de l'app,
la fournit aux routes, puis la ferme proprement (connexion rendue au pool).

🔹 Avantages :

Aucun état global : l'engine est injecté, les tests construisent le leur.

Réutilisable par injection (Depends(get_session)).
"""

import logging
from typing import Any, Dict, Iterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

# Import all models for creating all tables
from app.db.models.todos import Todo  # noqa: F401
from app.db.models.notes import Note  # noqa: F401

from app.core.config import Settings

logger = logging.getLogger(__name__)


def _is_in_memory_sqlite(url: str) -> bool:
    return make_url(url).database in (None, "", ":memory:")


def build_engine(settings: Settings) -> Engine:
    url = settings.DATABASE_URL

    is_sqlite = url.startswith("sqlite:")

    connect_args: Dict[str, Any] = {}
    engine_kwargs: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False
        if _is_in_memory_sqlite(url):
            # une seule connexion partagée, sinon chaque connexion voit une base vide
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["pool_size"] = settings.POOL_SIZE

    # echo seulement en dev pour ne pas polluer les logs en prod
    return create_engine(
        url,
        echo=(settings.ENV == "dev"),
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres ; inutile pour SQLite
        **engine_kwargs,
    )


def init_db(engine: Engine) -> None:
    """
    Crée les tables si elles n'existent pas.
    Ce n'est pas un système de migration.
    """
    SQLModel.metadata.create_all(engine)


def check_connection(engine: Engine) -> bool:
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Error connecting to the database")
        return False
    logger.info("Successfully connected to the database")
    return True


def get_session(request: Request) -> Iterator[Session]:
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(request.app.state.engine) as session:
        yield session
