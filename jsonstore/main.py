"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from jsonstore.config import Settings, get_settings
from jsonstore.infrastructure.database import Database
from jsonstore.infrastructure.guards import build_mutation_guard
from jsonstore.infrastructure.logging.log_config import setup_logging
from jsonstore.presentation.api.errors import register_exception_handlers
from jsonstore.presentation.api.router import build_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: prepare logging and the records table, then release the pool on shutdown."""
    settings: Settings = app.state.settings
    database: Database = app.state.database
    setup_logging(settings)

    try:
        await database.create_tables()
    except (SQLAlchemyError, OSError):
        # Keep serving: each request will answer 500 until storage is reachable.
        logger.exception("Database connection failed")

    yield

    await database.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database.from_settings(settings)
    app.state.mutation_guard = build_mutation_guard(settings)

    register_exception_handlers(app)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", settings.mutation_lock_header],
    )

    # Any OPTIONS request succeeds with an empty body, whatever the path.
    @app.options("/{rest:path}", include_in_schema=False)
    async def options_ok() -> Response:
        return Response(status_code=200)

    app.include_router(build_router(settings.api_prefix))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "jsonstore.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
