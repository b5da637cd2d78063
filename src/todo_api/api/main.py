"""FastAPI application factory and configuration."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from todo_api.core.logging import configure_logging
from todo_api.db import DatabaseSessionManager, InMemoryTodoStore, TodoRepository, TodoStore

from .config import (
    get_api_settings,
    get_database_settings,
    get_logging_settings,
    get_store_settings,
)
from .handlers import register_exception_handlers
from .middleware import CaseInsensitivePrefixMiddleware, LoggingMiddleware, RequestIDMiddleware
from .routers import health_router, todos_router
from .routers.todos import TODO_PREFIX

logger = structlog.get_logger()


async def _open_store(app: FastAPI) -> None:
    """Build the configured todo store and attach it to app.state."""
    backend = get_store_settings().backend

    if backend == "database":
        db_settings = get_database_settings()
        manager = DatabaseSessionManager(
            db_settings.url,
            pool_size=db_settings.pool_size,
            max_overflow=db_settings.max_overflow,
            echo=db_settings.echo,
        )
        if db_settings.create_tables:
            await manager.create_all()
        app.state.db_manager = manager
        app.state.todo_store = TodoRepository(manager)
    else:
        app.state.todo_store = InMemoryTodoStore()

    logger.info("todo_store_opened", backend=backend)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Opens the todo store on startup unless one was injected, and
    disposes the database engine on shutdown.

    Args:
        app: FastAPI application

    Yields:
        None
    """
    # Startup
    logger.info("starting_application")
    if getattr(app.state, "todo_store", None) is None:
        await _open_store(app)

    yield

    # Shutdown
    logger.info("shutting_down_application")
    manager = getattr(app.state, "db_manager", None)
    if manager is not None:
        await manager.close()
        app.state.db_manager = None


def create_app(store: TodoStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Todo store to serve. When omitted the store is built
            from settings during startup.

    Returns:
        Configured FastAPI application
    """
    settings = get_api_settings()
    log_settings = get_logging_settings()
    configure_logging(log_settings.level, log_settings.json_format)

    app = FastAPI(
        title=settings.title,
        description=settings.description,
        version=settings.version,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "health", "description": "Health check endpoints"},
            {"name": "todos", "description": "Todo management"},
        ],
    )
    app.state.todo_store = store

    # Register middleware (order matters - first added = last executed)
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(CaseInsensitivePrefixMiddleware, prefix=TODO_PREFIX)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # CORS
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["Location", "X-Request-ID"],
        )

    register_exception_handlers(app)

    # Health checks (no prefix)
    app.include_router(health_router)
    app.include_router(todos_router)

    logger.info(
        "application_configured",
        title=settings.title,
        version=settings.version,
        debug=settings.debug,
    )

    return app


# Application instance
app = create_app()
