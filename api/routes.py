"""
Recipe Service API Routes
Main router configuration for all API endpoints
"""

from fastapi import APIRouter
import structlog

from api.endpoints import health, recipes

logger = structlog.get_logger()

# Create main API router
api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    recipes.router,
    prefix="/recipes",
    tags=["recipes"]
)

# Probes are mounted at the application root, see main
health_router = health.router

logger.debug("API routes configured")
