import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend_fastapi.api.errors import register_exception_handlers
from backend_fastapi.api.routes.tasks import router as tasks_router
from infrastructure.container import create_task_repository
from infrastructure.settings import Settings

logger = logging.getLogger(__name__)


def create_app(
    db_path: str | os.PathLike[str] | None = None,
    orm: str | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Build the API with its own storage handle.

    The store is opened here, before any request is served, so a storage
    failure aborts startup.
    """
    if settings is None:
        # The environment only fills in what the caller left out.
        settings = Settings.from_env() if db_path is None or orm is None else Settings()
    orm = orm or settings.orm
    repository = create_task_repository(orm, db_path or settings.db_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        app.state.task_repository.close()

    app = FastAPI(title="Task API", lifespan=lifespan)
    app.state.task_repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)
    app.include_router(tasks_router)

    logger.info("Task API ready (orm=%s)", orm)
    return app
