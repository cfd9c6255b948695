import pytest

from app.recipe.schema import Ingredient, Recipe


@pytest.fixture
def egg_toast():
    return Recipe(
        name="Egg Toast",
        ingredients=(
            Ingredient(name="Egg", quantity=2, unit="grams"),
            Ingredient(name="B", quantity=0, unit="cups"),
        ),
        instructions="Cook.",
        preparation_time=5,
    )


@pytest.fixture
def pancake():
    return Recipe(
        name="Pancake",
        ingredients=(
            Ingredient(name="Flour", quantity=100, unit="grams"),
            Ingredient(name="Sugar", quantity=50, unit="grams"),
            Ingredient(name="Milk", quantity=1, unit="cups"),
        ),
        instructions="Mix and fry.",
        preparation_time=20,
    )
