"""
Recipe Service Services Module
Recipe persistence, search and management
"""

from .recipe_store import RecipeStore
from .recipe_search import RecipeSearchEngine, filter_by_included_ingredients, filter_by_excluded_ingredients
from .recipe_service import RecipeService

__all__ = [
    # Persistence
    "RecipeStore",

    # Search
    "RecipeSearchEngine",
    "filter_by_included_ingredients",
    "filter_by_excluded_ingredients",

    # Management
    "RecipeService",
]
