"""listkeeper API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to a JSON {"error": ...} body
    - CORS configured from settings (any origin by default)
    - The store handle lives on app.state.item_store: opened in the lifespan
      unless one was injected, and closed on shutdown only if the lifespan
      opened it
    - A store that fails to open leaves the API up; item routes answer 500

Design Decisions:
    - create_app(store=...) lets tests inject a store per test
    - Lifespan over @app.on_event; uvicorn turns SIGTERM/SIGINT into lifespan
      shutdown after it stops accepting connections
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from listkeeper.api.error_handlers import register_error_handlers
from listkeeper.api.routes import health, items
from listkeeper.config import Settings, get_settings
from listkeeper.core.errors import DatabaseError
from listkeeper.core.repository_protocols import ItemStore
from listkeeper.infrastructure.item_store import SqlItemStore
from listkeeper.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    owns_store = app.state.item_store is None
    if owns_store:
        database_path = settings.resolved_database_path
        logger.info(
            f"Using database path: {database_path}",
            extra={"database_path": database_path},
        )
        try:
            app.state.item_store = await SqlItemStore.open(database_path)
            logger.info("Database initialized successfully")
        except DatabaseError as e:
            logger.error(
                f"Database initialization error: {e.message}",
                extra={"error_code": e.code, "operation": e.operation},
            )
    logger.info("listkeeper API started")
    yield
    logger.info("listkeeper API shutting down")
    if owns_store and app.state.item_store is not None:
        await app.state.item_store.close()
        app.state.item_store = None
        logger.info("Database closed")


def create_app(
    settings: Settings | None = None, store: ItemStore | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="listkeeper API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.item_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(items.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
