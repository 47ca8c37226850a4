import os

# Settings are read at import time; point them at a throwaway database first
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import asyncio  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from core.database import Base, register_sqlite_functions  # noqa: E402
from models.recipe_models import Recipe  # noqa: E402
from services.recipe_store import RecipeStore  # noqa: E402


@pytest.fixture
def client():
    from main import app

    # Entering the client runs the lifespan, which creates a fresh in-memory schema
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_recipe():
    def _make(title="Test Recipe", ingredients=("Ingredient 1", "Ingredient 2"),
              instructions="Mix all ingredients and cook", vegetarian=False, servings=4,
              description="A simple test recipe description"):
        return Recipe(
            title=title,
            description=description,
            ingredients=list(ingredients),
            instructions=instructions,
            vegetarian=vegetarian,
            servings=servings,
        )
    return _make


@pytest.fixture
def run_with_store():
    """Run ``scenario(store)`` against a RecipeStore over a fresh in-memory database"""

    def _run(scenario):
        async def _main():
            engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
            register_sqlite_functions(engine)
            try:
                async with engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
                factory = async_sessionmaker(engine, expire_on_commit=False)
                async with factory() as session:
                    return await scenario(RecipeStore(session))
            finally:
                await engine.dispose()

        return asyncio.run(_main())

    return _run


@pytest.fixture
def recipe_payload():
    return {
        "title": "Spaghetti Carbonara",
        "description": "Classic Roman pasta",
        "ingredients": ["Pasta", "Eggs", "Cheese", "Bacon"],
        "instructions": "Boil the pasta. Whisk eggs with cheese. Fry the bacon and combine.",
        "vegetarian": False,
        "servings": 4,
    }
