"""Top-level API router — health plus the record routes under the configured prefix."""

from fastapi import APIRouter

from jsonstore.presentation.api.endpoints.health import router as health_router
from jsonstore.presentation.api.endpoints.records import router as records_router


def build_router(api_prefix: str) -> APIRouter:
    router = APIRouter()
    router.include_router(health_router)
    router.include_router(records_router, prefix=api_prefix)
    return router
