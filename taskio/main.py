"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import Settings, get_settings
from .db import SqliteTaskStore, TaskStore
from .logging_setup import setup_logging
from .routers import tasks
from .services import TaskService

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "REST API for Taskio task management. Provides endpoints for creating, "
    "reading, updating and deleting tasks, as well as searching and filtering "
    "them by text, status, due date range and category."
)


def create_app(settings: Settings | None = None, store: TaskStore | None = None) -> FastAPI:
    """Build the application.

    Without an explicit store, a SQLite store at ``settings.db_path`` is
    initialized on startup.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize database on startup."""
        if store is None:
            sqlite_store = SqliteTaskStore(settings.db_path)
            sqlite_store.init_db()
            app.state.task_service = TaskService(sqlite_store)
        else:
            app.state.task_service = TaskService(store)
        yield

    app = FastAPI(
        title="Taskio API",
        description=DESCRIPTION,
        version=__version__,
        contact={"name": "Taskio Team", "email": "support@taskio.com"},
        license_info={"name": "MIT License", "url": "https://opensource.org/licenses/MIT"},
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(tasks.router)
    return app


app = create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Starting Taskio on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "taskio.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
