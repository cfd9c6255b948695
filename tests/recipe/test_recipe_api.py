import pytest
from httpx import ASGITransport, AsyncClient

from app.container import container
from app.main import app
from app.storage.store import InMemoryStore

transport = ASGITransport(app=app)


@pytest.fixture(autouse=True)
def in_memory_store():
    store = InMemoryStore()
    container.recipe_session.reset()
    with container.store.override(store):
        yield store
    container.recipe_session.reset()


@pytest.mark.asyncio
async def test_get_draft_returns_empty_recipe():
    # When
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/recipe/draft")

    # Then
    assert resp.status_code == 200
    body = resp.json()
    assert body["recipe"] == {"name": "", "ingredients": [], "instructions": "", "preparation_time": 0.0}
    assert body["totals"] == {"grams": 0, "cups": 0, "tablespoons": 0, "teaspoons": 0}


@pytest.mark.asyncio
async def test_edit_and_submit_valid_recipe():
    # Given
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        await ac.patch("/recipe/draft", json={"name": "Pancake", "instructions": "Fry.", "preparation_time": 15})
        await ac.post("/recipe/draft/ingredients")
        await ac.patch("/recipe/draft/ingredients/0", json={"field": "name", "value": "Flour"})
        draft = await ac.patch("/recipe/draft/ingredients/0", json={"field": "quantity", "value": 200})

        # When
        resp = await ac.post("/recipe/draft/submit")

    # Then
    assert draft.json()["totals"]["grams"] == 200
    assert resp.status_code == 200
    body = resp.json()
    assert body["valid"] is True
    assert body["summary"]["recipe"]["name"] == "Pancake"
    assert body["summary"]["totals"]["grams"] == 200


@pytest.mark.asyncio
async def test_submit_invalid_recipe_returns_full_report():
    # Given
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        await ac.patch("/recipe/draft", json={"name": "Hi"})
        await ac.post("/recipe/draft/ingredients")

        # When
        resp = await ac.post("/recipe/draft/submit")

    # Then
    assert resp.status_code == 200
    body = resp.json()
    assert body["valid"] is False
    assert body["summary"] is None
    assert body["errors"] == {
        "name": "Recipe name should be at least 3 characters",
        "ingredients": {"0": "Ingredient quantity should be greater than 0"},
        "instructions": "",
        "preparation_time": "Preparation time should be a positive number",
    }


@pytest.mark.asyncio
async def test_remove_unknown_ingredient_returns_404():
    # When
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.delete("/recipe/draft/ingredients/0")

    # Then
    assert resp.status_code == 404
    assert resp.json()["error_code"] == "RECIPE_001"


@pytest.mark.asyncio
async def test_update_ingredient_with_unknown_field_returns_422():
    # When
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        await ac.post("/recipe/draft/ingredients")
        resp = await ac.patch("/recipe/draft/ingredients/0", json={"field": "calories", "value": 1})

    # Then
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_update_ingredient_with_unknown_unit_returns_422():
    # When
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        await ac.post("/recipe/draft/ingredients")
        resp = await ac.patch("/recipe/draft/ingredients/0", json={"field": "unit", "value": "pinch"})

    # Then
    assert resp.status_code == 422
    assert resp.json()["error_code"] == "RECIPE_002"


@pytest.mark.asyncio
async def test_save_without_validation_and_list(in_memory_store):
    # Given
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        await ac.patch("/recipe/draft", json={"name": "Hi"})

        # When
        first = await ac.post("/recipe/draft/save")
        await ac.post("/recipe/draft/reset")
        second = await ac.post("/recipe/draft/save")
        listed = await ac.get("/recipes")

    # Then
    assert first.status_code == 201
    assert first.json() == {"saved_count": 1}
    assert second.json() == {"saved_count": 2}
    assert [r["name"] for r in listed.json()["recipes"]] == ["Hi", ""]


@pytest.mark.asyncio
async def test_save_with_corrupted_store_returns_500(in_memory_store):
    # Given
    in_memory_store.set("recipes", "oops")

    # When
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.post("/recipe/draft/save")

    # Then
    assert resp.status_code == 500
    assert resp.json()["error_code"] == "STORAGE_003"
    assert in_memory_store.get("recipes") == "oops"


@pytest.mark.asyncio
async def test_list_units():
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        resp = await ac.get("/units")

    assert resp.json() == {"units": ["grams", "cups", "tablespoons", "teaspoons"]}
