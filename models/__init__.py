"""
Recipe Service Database Models
Central import module for all database models
"""

from .recipe_models import Recipe, RecipeIngredient

__all__ = [
    "Recipe",
    "RecipeIngredient",
]
