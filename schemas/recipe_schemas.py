"""
Recipe Service Recipe Schemas
Pydantic models for recipe API requests and responses
"""

from typing import List, Optional
from datetime import datetime, timezone
from uuid import UUID
from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecipeRequest(BaseModel):
    """Payload for creating or replacing a recipe"""

    title: str = Field(..., max_length=255, json_schema_extra={"example": "Vegetable Stir Fry"})
    description: Optional[str] = Field(None, json_schema_extra={"example": "Quick weeknight stir fry"})
    ingredients: List[str] = Field(
        ...,
        min_length=1,
        json_schema_extra={"example": ["Broccoli", "Carrots", "Peppers", "Soy Sauce"]},
    )
    instructions: str = Field(..., json_schema_extra={"example": "Stir fry the vegetables in a hot wok."})
    vegetarian: bool = False
    servings: int = Field(..., ge=1, json_schema_extra={"example": 2})

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Title is required")
        return v

    @field_validator("instructions")
    @classmethod
    def instructions_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Instructions are required")
        return v


class RecipeResponse(BaseModel):
    """Recipe as returned by the API"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list)
    instructions: str
    vegetarian: bool
    servings: int
    created_at: datetime
    updated_at: datetime

    @field_validator("ingredients", mode="before")
    @classmethod
    def copy_ingredients(cls, v):
        # Association proxies are not lists; materialise them
        return list(v) if v is not None else []

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite drops the offset of stored timestamps
        return v.replace(tzinfo=timezone.utc) if v.tzinfo is None else v


class RecipeSearchRequest(BaseModel):
    """
    Search criteria for recipes

    Every field is optional; an absent value or empty list places no
    constraint on that dimension.
    """

    vegetarian: Optional[bool] = None
    servings: Optional[int] = None
    include_ingredients: List[str] = Field(default_factory=list)
    exclude_ingredients: List[str] = Field(default_factory=list)
    instruction_text: Optional[str] = None

    @field_validator("include_ingredients", "exclude_ingredients", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return [] if v is None else v
