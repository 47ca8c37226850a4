"""
Recipe Service Health Check Endpoints
System health monitoring and diagnostics
"""

from fastapi import APIRouter, HTTPException, status
import asyncio
import time

from core.database import DatabaseHealthCheck
from core.config import settings

router = APIRouter()


@router.get("/")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.APP_NAME,
        "version": settings.VERSION,
        "timestamp": time.time()
    }


@router.get("/live")
async def liveness_check():
    """Kubernetes liveness probe endpoint"""
    return {"status": "alive"}


@router.get("/ready")
async def readiness_check():
    """
    Kubernetes readiness probe endpoint
    Checks the database connection
    """
    try:
        db_healthy = await asyncio.wait_for(
            DatabaseHealthCheck.check_connection(),
            timeout=5.0
        )
    except asyncio.TimeoutError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"status": "not_ready", "error": "Health check timeout"}
        )

    if not db_healthy:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"status": "not_ready", "database": "disconnected"}
        )

    return {
        "status": "ready",
        "database": "connected",
        "details": await DatabaseHealthCheck.get_connection_info(),
        "timestamp": time.time()
    }


@router.get("/version")
async def version_info():
    """Application version information"""
    return {
        "service": settings.APP_NAME,
        "version": settings.VERSION,
        "environment": settings.ENVIRONMENT,
        "features": {
            "search_push_down_ingredients": settings.SEARCH_PUSH_DOWN_INGREDIENTS,
        }
    }
