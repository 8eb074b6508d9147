"""Health check endpoints — no store access, always available."""

from fastapi import APIRouter, Depends

from app.config import get_settings
from app.infrastructure.database import MongoConnectionManager
from app.infrastructure.dependencies import get_connection_manager

root_router = APIRouter(tags=["Health"])
router = APIRouter(tags=["Health"])


@root_router.get("/")
async def root() -> dict:
    """Liveness message."""
    return {"message": "Import Export Hub API is running!"}


@router.get("/health")
async def health_check(
    connections: MongoConnectionManager = Depends(get_connection_manager),
) -> dict:
    """Returns the current application health status.

    Reports whether the store handle is cached without opening a connection.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": "connected" if connections.is_connected else "not connected",
    }
