"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure.database import MongoConnectionManager
from app.infrastructure.logging.log_config import setup_logging
from app.presentation.api.endpoints.health import root_router
from app.presentation.api.errors import register_exception_handlers
from app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — the store connection is closed on shutdown.

    Nothing connects here: the first request that needs the store opens the
    connection, which also covers hosts that never run the lifespan.
    """
    yield

    await app.state.connection_manager.close()


def create_app(connection_manager: MongoConnectionManager | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()
    setup_logging()

    if not settings.mongo_uri:
        logger.error("MONGO_URI not found; store operations will fail until it is set")

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.connection_manager = connection_manager or MongoConnectionManager(
        settings.mongo_uri,
        settings.mongo_db_name,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_exception_handlers(app)

    app.include_router(root_router)
    app.include_router(api_router)

    return app


app = create_app()


def serve() -> None:
    """Run a standalone listener; serverless hosts import ``app`` instead."""
    import uvicorn

    settings = get_settings()
    if settings.run_mode == "serverless":
        logger.info("RUN_MODE=serverless: not binding a port; serve 'app.main:app' from the host")
        return

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
    )


if __name__ == "__main__":
    serve()
