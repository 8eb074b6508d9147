"""Top-level API router — aggregates the endpoint routers under /api."""

from fastapi import APIRouter

from app.presentation.api.endpoints.health import router as health_router
from app.presentation.api.endpoints.imports import router as imports_router
from app.presentation.api.endpoints.products import router as products_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(products_router)
router.include_router(imports_router)
