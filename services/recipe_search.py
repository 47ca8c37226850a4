"""
Recipe Service Search Engine
Attribute filtering in the store composed with ingredient set filtering
"""

import logging
from typing import Collection, List, Sequence

from models.recipe_models import Recipe
from schemas.recipe_schemas import RecipeSearchRequest
from services.recipe_store import RecipeStore

logger = logging.getLogger(__name__)


def filter_by_included_ingredients(recipes: Sequence[Recipe], include: Collection[str]) -> List[Recipe]:
    """Keep recipes whose ingredients contain every name in ``include``"""
    required = set(include)
    return [recipe for recipe in recipes if required.issubset(recipe.ingredients)]


def filter_by_excluded_ingredients(recipes: Sequence[Recipe], exclude: Collection[str]) -> List[Recipe]:
    """Keep recipes whose ingredients contain no name in ``exclude``"""
    forbidden = set(exclude)
    return [recipe for recipe in recipes if forbidden.isdisjoint(recipe.ingredients)]


class RecipeSearchEngine:
    """
    Stateless recipe search

    Vegetarian, servings and instruction text are pushed down to the store as
    a single query. Ingredient inclusion/exclusion is then applied in memory,
    include first and exclude second; both are pure set filters so the order
    does not change the result. With ``push_down_ingredients`` the ingredient
    constraints are evaluated by the store in the same query instead.

    Store errors propagate to the caller unchanged.
    """

    def __init__(self, store: RecipeStore, push_down_ingredients: bool = False):
        self.store = store
        self.push_down_ingredients = push_down_ingredients

    async def search(self, criteria: RecipeSearchRequest) -> List[Recipe]:
        include = criteria.include_ingredients or []
        exclude = criteria.exclude_ingredients or []

        if self.push_down_ingredients:
            results = await self.store.search_with_ingredients(
                vegetarian=criteria.vegetarian,
                servings=criteria.servings,
                instruction_text=criteria.instruction_text,
                include_ingredients=include,
                exclude_ingredients=exclude,
            )
        else:
            results = await self.store.search_by_attributes(
                vegetarian=criteria.vegetarian,
                servings=criteria.servings,
                instruction_text=criteria.instruction_text,
            )

            if include:
                results = filter_by_included_ingredients(results, include)
            if exclude:
                results = filter_by_excluded_ingredients(results, exclude)

        logger.debug(
            "Recipe search matched %d recipe(s) (include=%d, exclude=%d, push_down=%s)",
            len(results), len(include), len(exclude), self.push_down_ingredients,
        )
        return results
