"""
➡️ But : assembler toutes les pièces du puzzle.

create_app() crée l’instance FastAPI (app).

Configure :

les logs (setup_logging)

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

schéma OpenAPI personnalisé

Inclut le router des tâches sous /api.

Cycle de vie (lifespan) : au démarrage l'engine est créé et les tables aussi,
à l'arrêt l'engine est fermé.

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d’exécution : uvicorn taskboard.main:app --reload.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard.core.config import Settings, settings as default_settings
from taskboard.core.logging_setup import setup_logging
from taskboard.core.openapi import custom_openapi
from taskboard.db.session import build_engine, init_db

from taskboard.api.routers import tasks

import uvicorn

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging(level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(settings)
        init_db(engine)
        app.state.engine = engine
        logger.info("Database ready (%s)", engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            engine.dispose()
            logger.info("Database connections closed")

    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        openapi_tags=[
            {"name": "tasks", "description": "Opérations liées aux tâches"},
        ],
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS (ajustez selon vos besoins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    # Routers
    app.include_router(tasks.router, prefix=settings.API_PREFIX)

    # Génération du schéma OpenAPI custom
    app.openapi = lambda: custom_openapi(app)
    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "taskboard.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=(default_settings.ENV == "dev"),
    ) # http://localhost:8080
