"""FastAPI application factory.

Run with ``uvicorn tasklists.api.app:create_app --factory`` or through the
``tasklists serve`` command.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import TaskListsSettings, get_settings
from ..database import create_db_and_tables
from ..logging_config import setup_logging
from .endpoints import task_lists, tasks
from .errors import register_exception_handlers


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create missing tables before serving requests."""
    create_db_and_tables()
    logger.info("Task lists API started")
    yield


def create_app(settings: TaskListsSettings | None = None) -> FastAPI:
    """Build the FastAPI application from ``settings``."""
    settings = settings or get_settings()
    setup_logging(settings.effective_log_level, settings.log_file)

    app = FastAPI(
        title=settings.api.title,
        description="Task lists and tasks with partial updates and progress tracking",
        version=__version__,
        debug=settings.debug_mode,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(task_lists.router)
    app.include_router(tasks.router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app
