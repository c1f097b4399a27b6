import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crud_api.core.config import get_settings
from crud_api.core.error_handlers import register_error_handlers
from crud_api.core.logging import configure_logging
from crud_api.db.migrations import run_migrations
from crud_api.db.session import get_engine
from crud_api.repositories.sql_repository import SQLRepository
from crud_api.routers import filmes as filmes_router
from crud_api.routers import health as health_router
from crud_api.routers import users as users_router
from crud_api.services.filme_service import FilmeService
from crud_api.services.user_service import UserService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.auto_migrate:
        applied = run_migrations(get_engine())
        if applied:
            logger.info("Schema migrated to version %s", applied[-1])
    logger.info("Aplicacao rodando na porta %s (%s)", settings.port, settings.app_env)
    yield


def create_app() -> FastAPI:
    """Factory compativel com uvicorn/gunicorn."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="CRUD Usuarios e Filmes API", lifespan=lifespan)

    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    repository = SQLRepository()
    app.state.user_service = UserService(repository)
    app.state.filme_service = FilmeService(repository)

    app.include_router(health_router.router)
    app.include_router(users_router.router)
    app.include_router(filmes_router.router)
    return app


app = create_app()
