"""
Recipe Service Core Dependencies
FastAPI dependencies wiring sessions, the recipe store and services together
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Annotated

from core.config import settings
from core.database import get_db
from services.recipe_search import RecipeSearchEngine
from services.recipe_service import RecipeService
from services.recipe_store import RecipeStore


def get_recipe_store(db: Annotated[AsyncSession, Depends(get_db)]) -> RecipeStore:
    """Recipe store bound to the request's database session"""
    return RecipeStore(db)


def get_recipe_service(store: Annotated[RecipeStore, Depends(get_recipe_store)]) -> RecipeService:
    """Recipe service for the current request"""
    search_engine = RecipeSearchEngine(
        store,
        push_down_ingredients=settings.SEARCH_PUSH_DOWN_INGREDIENTS,
    )
    return RecipeService(store, search_engine)


# Type aliases for cleaner endpoint signatures
RecipeServiceDep = Annotated[RecipeService, Depends(get_recipe_service)]
