"""
Tests for the recipe store against an in-memory SQLite database.
"""

import uuid

import pytest

from core.exceptions import RecipeNotFoundError
from schemas.recipe_schemas import RecipeSearchRequest
from services.recipe_search import RecipeSearchEngine


async def _seed(store, make_recipe):
    carbonara = await store.save(make_recipe(
        title="Carbonara",
        ingredients=["Pasta", "Eggs", "Cheese", "Bacon"],
        instructions="Boil the pasta and toss with eggs",
        vegetarian=False,
        servings=4,
    ))
    stir_fry = await store.save(make_recipe(
        title="Stir Fry",
        ingredients=["Broccoli", "Carrots", "Peppers", "Soy Sauce"],
        instructions="Fry everything in a hot WOK",
        vegetarian=True,
        servings=2,
    ))
    pomodoro = await store.save(make_recipe(
        title="Pomodoro",
        ingredients=["Pasta", "Tomato", "Basil", "Cheese"],
        instructions="Simmer the tomato sauce, then add 100% of the pasta",
        vegetarian=True,
        servings=4,
    ))
    return carbonara, stir_fry, pomodoro


def _titles(recipes):
    return [recipe.title for recipe in recipes]


def test_save_assigns_identity_and_timestamps(run_with_store, make_recipe):
    async def scenario(store):
        saved = await store.save(make_recipe(ingredients=["B", "A", "C"]))
        loaded = await store.find_by_id(saved.id)
        return saved, loaded

    saved, loaded = run_with_store(scenario)

    assert isinstance(saved.id, uuid.UUID)
    assert saved.created_at is not None
    assert saved.updated_at == saved.created_at
    assert list(loaded.ingredients) == ["B", "A", "C"]


def test_save_existing_refreshes_updated_at_only(run_with_store, make_recipe):
    async def scenario(store):
        saved = await store.save(make_recipe())
        recipe_id, created_at, first_update = saved.id, saved.created_at, saved.updated_at

        saved.title = "Renamed"
        saved.ingredients = ["Other"]
        updated = await store.save(saved)
        return recipe_id, created_at, first_update, updated, await store.find_all()

    recipe_id, created_at, first_update, updated, everything = run_with_store(scenario)

    assert updated.id == recipe_id
    assert updated.created_at == created_at
    assert updated.updated_at > first_update
    assert len(everything) == 1
    assert list(everything[0].ingredients) == ["Other"]


def test_find_by_id_unknown_returns_none(run_with_store):
    async def scenario(store):
        return await store.find_by_id(uuid.uuid4())

    assert run_with_store(scenario) is None


def test_delete_by_id(run_with_store, make_recipe):
    async def scenario(store):
        saved = await store.save(make_recipe())
        assert await store.exists_by_id(saved.id)
        await store.delete_by_id(saved.id)
        return await store.exists_by_id(saved.id), await store.find_all()

    exists_after, remaining = run_with_store(scenario)

    assert exists_after is False
    assert remaining == []


def test_delete_unknown_id_raises(run_with_store):
    missing = uuid.uuid4()

    async def scenario(store):
        await store.delete_by_id(missing)

    with pytest.raises(RecipeNotFoundError) as excinfo:
        run_with_store(scenario)
    assert excinfo.value.recipe_id == missing


def test_search_by_attributes(run_with_store, make_recipe):
    async def scenario(store):
        await _seed(store, make_recipe)
        return {
            "all": await store.search_by_attributes(),
            "vegetarian": await store.search_by_attributes(vegetarian=True),
            "not_vegetarian": await store.search_by_attributes(vegetarian=False),
            "serves_4": await store.search_by_attributes(servings=4),
            "vegetarian_serves_4": await store.search_by_attributes(vegetarian=True, servings=4),
            "wok": await store.search_by_attributes(instruction_text="wok"),
            "percent": await store.search_by_attributes(instruction_text="100%"),
            "wildcard": await store.search_by_attributes(instruction_text="%"),
            "underscore": await store.search_by_attributes(instruction_text="_"),
        }

    results = run_with_store(scenario)

    assert _titles(results["all"]) == ["Carbonara", "Stir Fry", "Pomodoro"]
    assert _titles(results["vegetarian"]) == ["Stir Fry", "Pomodoro"]
    assert _titles(results["not_vegetarian"]) == ["Carbonara"]
    assert _titles(results["serves_4"]) == ["Carbonara", "Pomodoro"]
    assert _titles(results["vegetarian_serves_4"]) == ["Pomodoro"]
    assert _titles(results["wok"]) == ["Stir Fry"]
    assert _titles(results["percent"]) == ["Pomodoro"]
    assert _titles(results["wildcard"]) == ["Pomodoro"]
    assert results["underscore"] == []


def test_instruction_search_folds_non_ascii_case(run_with_store, make_recipe):
    async def scenario(store):
        await store.save(make_recipe(title="Tart", instructions="Add the CRÈME fraîche"))
        await store.save(make_recipe(title="Soup", instructions="Stir in the cream"))
        return {
            "lower": await store.search_by_attributes(instruction_text="crème"),
            "upper": await store.search_by_attributes(instruction_text="FRAÎCHE"),
            "finder": await store.find_by_instructions_containing("Crème"),
        }

    results = run_with_store(scenario)

    assert _titles(results["lower"]) == ["Tart"]
    assert _titles(results["upper"]) == ["Tart"]
    assert _titles(results["finder"]) == ["Tart"]


def test_single_dimension_finders(run_with_store, make_recipe):
    async def scenario(store):
        await _seed(store, make_recipe)
        return {
            "vegetarian": await store.find_by_vegetarian(True),
            "servings": await store.find_by_servings(2),
            "instructions": await store.find_by_instructions_containing("PASTA"),
            "with_pasta_cheese": await store.find_by_ingredients_in(["Pasta", "Cheese"]),
            "with_duplicates": await store.find_by_ingredients_in(["Pasta", "Pasta"]),
            "with_missing": await store.find_by_ingredients_in(["Pasta", "Mushroom"]),
            "without_pasta": await store.find_by_ingredients_not_in(["Pasta"]),
            "without_nothing": await store.find_by_ingredients_not_in([]),
        }

    results = run_with_store(scenario)

    assert _titles(results["vegetarian"]) == ["Stir Fry", "Pomodoro"]
    assert _titles(results["servings"]) == ["Stir Fry"]
    assert _titles(results["instructions"]) == ["Carbonara", "Pomodoro"]
    assert _titles(results["with_pasta_cheese"]) == ["Carbonara", "Pomodoro"]
    assert _titles(results["with_duplicates"]) == ["Carbonara", "Pomodoro"]
    assert results["with_missing"] == []
    assert _titles(results["without_pasta"]) == ["Stir Fry"]
    assert len(results["without_nothing"]) == 3


@pytest.mark.parametrize(
    "criteria",
    [
        {},
        {"vegetarian": True},
        {"include_ingredients": ["Pasta"]},
        {"include_ingredients": ["Tomato", "Basil"]},
        {"include_ingredients": ["Tomato", "Mushroom"]},
        {"exclude_ingredients": ["Bacon"]},
        {"exclude_ingredients": ["tomato"]},
        {"include_ingredients": ["Cheese"], "exclude_ingredients": ["Eggs"]},
        {"servings": 4, "include_ingredients": ["Pasta"], "instruction_text": "eggs"},
    ],
)
def test_push_down_matches_in_memory_filtering(run_with_store, make_recipe, criteria):
    request = RecipeSearchRequest(**criteria)

    async def scenario(store):
        await _seed(store, make_recipe)
        in_memory = await RecipeSearchEngine(store).search(request)
        pushed_down = await RecipeSearchEngine(store, push_down_ingredients=True).search(request)
        return _titles(in_memory), _titles(pushed_down)

    in_memory, pushed_down = run_with_store(scenario)

    assert in_memory == pushed_down
