"""
Recipe Service Recipe Management Endpoints
Recipe CRUD operations and search
"""

from fastapi import APIRouter, Response, status
from typing import List
from uuid import UUID
import structlog

from core.dependencies import RecipeServiceDep
from schemas.recipe_schemas import RecipeRequest, RecipeResponse, RecipeSearchRequest

logger = structlog.get_logger()
router = APIRouter()


@router.get("", response_model=List[RecipeResponse])
async def get_recipes(service: RecipeServiceDep):
    """Get all recipes"""
    return await service.get_all_recipes()


@router.get("/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(recipe_id: UUID, service: RecipeServiceDep):
    """Get specific recipe"""
    return await service.get_recipe_by_id(recipe_id)


@router.post("", response_model=RecipeResponse, status_code=status.HTTP_201_CREATED)
async def create_recipe(recipe: RecipeRequest, service: RecipeServiceDep):
    """Create new recipe"""
    return await service.create_recipe(recipe)


@router.put("/{recipe_id}", response_model=RecipeResponse)
async def update_recipe(recipe_id: UUID, recipe: RecipeRequest, service: RecipeServiceDep):
    """Update existing recipe"""
    return await service.update_recipe(recipe_id, recipe)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recipe(recipe_id: UUID, service: RecipeServiceDep):
    """Delete recipe"""
    await service.delete_recipe(recipe_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/search", response_model=List[RecipeResponse])
async def search_recipes(criteria: RecipeSearchRequest, service: RecipeServiceDep):
    """
    Search recipes

    Every criterion is optional and all given criteria must match. Ingredient
    names are compared exactly; instruction text is a case-insensitive
    substring match.
    """
    results = await service.search_recipes(criteria)
    logger.info(
        "Recipe search",
        criteria=criteria.model_dump(exclude_none=True),
        result_count=len(results),
    )
    return results
