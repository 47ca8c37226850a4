"""
Recipe Service Recipe Management
CRUD use-cases and search over the recipe store
"""

import logging
import uuid
from typing import List, Optional

from core.exceptions import RecipeNotFoundError
from models.recipe_models import Recipe
from schemas.recipe_schemas import RecipeRequest, RecipeResponse, RecipeSearchRequest
from services.recipe_search import RecipeSearchEngine
from services.recipe_store import RecipeStore

logger = logging.getLogger(__name__)


def to_response(recipe: Recipe) -> RecipeResponse:
    return RecipeResponse.model_validate(recipe)


def recipe_from_request(request: RecipeRequest) -> Recipe:
    return Recipe(
        title=request.title,
        description=request.description,
        ingredients=list(request.ingredients),
        instructions=request.instructions,
        vegetarian=request.vegetarian,
        servings=request.servings,
    )


def update_recipe_from_request(recipe: Recipe, request: RecipeRequest) -> None:
    recipe.title = request.title
    recipe.description = request.description
    recipe.ingredients = list(request.ingredients)
    recipe.instructions = request.instructions
    recipe.vegetarian = request.vegetarian
    recipe.servings = request.servings


class RecipeService:
    """Recipe use-cases bound to a single store (one per request)"""

    def __init__(self, store: RecipeStore, search_engine: Optional[RecipeSearchEngine] = None):
        self.store = store
        self.search_engine = search_engine or RecipeSearchEngine(store)

    async def get_all_recipes(self) -> List[RecipeResponse]:
        return [to_response(recipe) for recipe in await self.store.find_all()]

    async def get_recipe_by_id(self, recipe_id: uuid.UUID) -> RecipeResponse:
        recipe = await self.store.find_by_id(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        return to_response(recipe)

    async def create_recipe(self, request: RecipeRequest) -> RecipeResponse:
        saved = await self.store.save(recipe_from_request(request))
        logger.info("Created recipe %s", saved.id)
        return to_response(saved)

    async def update_recipe(self, recipe_id: uuid.UUID, request: RecipeRequest) -> RecipeResponse:
        existing = await self.store.find_by_id(recipe_id)
        if existing is None:
            raise RecipeNotFoundError(recipe_id)

        update_recipe_from_request(existing, request)
        updated = await self.store.save(existing)
        logger.info("Updated recipe %s", updated.id)
        return to_response(updated)

    async def delete_recipe(self, recipe_id: uuid.UUID) -> None:
        if not await self.store.exists_by_id(recipe_id):
            raise RecipeNotFoundError(recipe_id)
        await self.store.delete_by_id(recipe_id)
        logger.info("Deleted recipe %s", recipe_id)

    async def search_recipes(self, criteria: RecipeSearchRequest) -> List[RecipeResponse]:
        return [to_response(recipe) for recipe in await self.search_engine.search(criteria)]
