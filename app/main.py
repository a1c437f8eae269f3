"""
➡️ But : assembler toutes les pièces du puzzle.

create_app(settings) crée l’instance FastAPI (app) et configure :

les logs,

CORS (autorisations de qui peut appeler ces API),

titre, version, tags, schéma OpenAPI personnalisé,

la traduction des erreurs en {"error": ...},

les routers (/api/todos, /api/notes).

Au démarrage (lifespan) : construit l'engine (pool de connexions), le range dans
app.state.engine, teste la connexion et crée les tables manquantes.

🔹 Avantages :

Point unique d’exécution : uvicorn app.main:app --reload.

Les tests construisent leur propre app avec leurs propres settings.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from app.api.v1.routers import notes, todos
from app.core.config import Settings, settings
from app.core.errors import register_exception_handlers
from app.core.log_config import configure_logging
from app.core.openapi import custom_openapi
from app.db.session import build_engine, check_connection, init_db

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    cfg = app_settings or settings
    configure_logging(cfg.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(cfg)
        app.state.engine = engine

        connected = check_connection(engine) if cfg.CHECK_DB_ON_STARTUP else True
        if cfg.INIT_DB and connected:
            try:
                init_db(engine)
            except SQLAlchemyError:
                # l'API démarre quand même ; chaque requête renverra 500 tant que la base est KO
                logger.exception("Database initialization failed during startup")

        logger.info("Server is running on port %s", cfg.PORT)
        yield
        engine.dispose()

    app = FastAPI(
        title=cfg.APP_NAME,
        version="1.0.0",
        openapi_tags=[
            {"name": "todos", "description": "Opérations CRUD sur les todos"},
            {"name": "notes", "description": "Opérations CRUD sur les notes"},
        ],
        lifespan=lifespan,
    )
    app.state.settings = cfg

    # CORS (ajustez selon vos besoins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.CORS_ORIGINS, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Routers
    app.include_router(todos.router, prefix="/api")
    app.include_router(notes.router, prefix="/api")

    # Génération du schéma OpenAPI custom
    app.openapi = lambda: custom_openapi(app)
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=(settings.ENV == "dev")) # http://localhost:5000
