"""Health check endpoint — served outside the record prefix."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from jsonstore.infrastructure.database import Database, get_database

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    request: Request,
    database: Database = Depends(get_database),
) -> JSONResponse:
    """Returns the current application health status, including a database ping."""
    settings = request.app.state.settings
    body = {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": database.backend_name,
    }
    try:
        await database.ping()
    except Exception as e:
        logger.warning("Database health check failed: %s", e)
        return JSONResponse(
            {**body, "status": "unhealthy", "error": f"Database health check failed: {e}"},
            status_code=503,
        )
    return JSONResponse(body)
