"""
Recipe Service Recipe Models
Database models for recipes and their ordered ingredient lists
"""

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.ext.associationproxy import AssociationProxy, association_proxy
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, mapped_column, relationship
from datetime import datetime, timezone
from typing import List, Optional
import uuid

from core.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Recipe(Base):
    """Recipe model for storing recipe information"""
    __tablename__ = "recipes"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    instructions: Mapped[str] = mapped_column(Text, nullable=False)
    vegetarian: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    servings: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Ingredient rows keep list order through their position column
    ingredient_rows: Mapped[List["RecipeIngredient"]] = relationship(
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.position",
        collection_class=ordering_list("position"),
        lazy="selectin",
    )

    ingredients: AssociationProxy[List[str]] = association_proxy(
        "ingredient_rows",
        "name",
        creator=lambda name: RecipeIngredient(name=name),
    )

    def __repr__(self) -> str:
        return f"<Recipe id={self.id} title={self.title!r}>"


class RecipeIngredient(Base):
    """Single ingredient name at a position within a recipe"""
    __tablename__ = "recipe_ingredients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recipe_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("recipes.id", ondelete="CASCADE"), nullable=False, index=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    recipe: Mapped["Recipe"] = relationship(back_populates="ingredient_rows")
