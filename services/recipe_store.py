"""
Recipe Service Recipe Store
Persistence operations for recipes over an async SQLAlchemy session
"""

import logging
import uuid
from typing import Iterable, List, Optional, Sequence

from sqlalchemy import Select, distinct, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import RecipeNotFoundError
from models.recipe_models import Recipe, RecipeIngredient, utcnow

logger = logging.getLogger(__name__)


def _unique(names: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(names))


class RecipeStore:
    """
    CRUD and query access to recipes

    Attribute predicates (vegetarian, servings, instruction text) are
    evaluated by the database. Ingredient rows are loaded eagerly with every
    recipe so results are fully materialised when returned.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _select(self) -> Select:
        return select(Recipe).order_by(Recipe.created_at, Recipe.id)

    async def _all(self, stmt: Select) -> List[Recipe]:
        result = await self.session.execute(stmt)
        return list(result.scalars().unique().all())

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    async def find_all(self) -> List[Recipe]:
        return await self._all(self._select())

    async def find_by_id(self, recipe_id: uuid.UUID) -> Optional[Recipe]:
        return await self.session.get(Recipe, recipe_id)

    async def exists_by_id(self, recipe_id: uuid.UUID) -> bool:
        stmt = select(exists().where(Recipe.id == recipe_id))
        return bool(await self.session.scalar(stmt))

    async def save(self, recipe: Recipe) -> Recipe:
        """Insert a recipe without an id, otherwise update it"""
        now = utcnow()
        if recipe.id is None:
            recipe.id = uuid.uuid4()
            recipe.created_at = now
            self.session.add(recipe)
            logger.debug("Inserting recipe %s", recipe.id)
        else:
            logger.debug("Updating recipe %s", recipe.id)
        recipe.updated_at = now

        await self.session.flush()
        await self.session.commit()
        return recipe

    async def delete_by_id(self, recipe_id: uuid.UUID) -> None:
        recipe = await self.find_by_id(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)

        await self.session.delete(recipe)
        await self.session.commit()
        logger.debug("Deleted recipe %s", recipe_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @staticmethod
    def _attribute_filters(
        stmt: Select,
        vegetarian: Optional[bool],
        servings: Optional[int],
        instruction_text: Optional[str],
    ) -> Select:
        if vegetarian is not None:
            stmt = stmt.where(Recipe.vegetarian == vegetarian)
        if servings is not None:
            stmt = stmt.where(Recipe.servings == servings)
        if instruction_text is not None:
            stmt = stmt.where(Recipe.instructions.icontains(instruction_text, autoescape=True))
        return stmt

    @staticmethod
    def _includes_all(stmt: Select, names: Sequence[str]) -> Select:
        names = _unique(names)
        matching = (
            select(RecipeIngredient.recipe_id)
            .where(RecipeIngredient.name.in_(names))
            .group_by(RecipeIngredient.recipe_id)
            .having(func.count(distinct(RecipeIngredient.name)) == len(names))
        )
        return stmt.where(Recipe.id.in_(matching))

    @staticmethod
    def _excludes_all(stmt: Select, names: Sequence[str]) -> Select:
        names = _unique(names)
        return stmt.where(
            ~exists().where(
                RecipeIngredient.recipe_id == Recipe.id,
                RecipeIngredient.name.in_(names),
            )
        )

    async def search_by_attributes(
        self,
        vegetarian: Optional[bool] = None,
        servings: Optional[int] = None,
        instruction_text: Optional[str] = None,
    ) -> List[Recipe]:
        """Recipes matching every given attribute; None means unconstrained"""
        stmt = self._attribute_filters(self._select(), vegetarian, servings, instruction_text)
        return await self._all(stmt)

    async def search_with_ingredients(
        self,
        vegetarian: Optional[bool] = None,
        servings: Optional[int] = None,
        instruction_text: Optional[str] = None,
        include_ingredients: Sequence[str] = (),
        exclude_ingredients: Sequence[str] = (),
    ) -> List[Recipe]:
        """Attribute search with ingredient constraints evaluated in the database"""
        stmt = self._attribute_filters(self._select(), vegetarian, servings, instruction_text)
        if include_ingredients:
            stmt = self._includes_all(stmt, include_ingredients)
        if exclude_ingredients:
            stmt = self._excludes_all(stmt, exclude_ingredients)
        return await self._all(stmt)

    async def find_by_vegetarian(self, vegetarian: bool) -> List[Recipe]:
        return await self.search_by_attributes(vegetarian=vegetarian)

    async def find_by_servings(self, servings: int) -> List[Recipe]:
        return await self.search_by_attributes(servings=servings)

    async def find_by_instructions_containing(self, instruction_text: str) -> List[Recipe]:
        return await self.search_by_attributes(instruction_text=instruction_text)

    async def find_by_ingredients_in(self, ingredients: Sequence[str]) -> List[Recipe]:
        """Recipes containing every one of the given ingredients"""
        if not ingredients:
            return await self.find_all()
        return await self._all(self._includes_all(self._select(), ingredients))

    async def find_by_ingredients_not_in(self, ingredients: Sequence[str]) -> List[Recipe]:
        """Recipes containing none of the given ingredients"""
        if not ingredients:
            return await self.find_all()
        return await self._all(self._excludes_all(self._select(), ingredients))
