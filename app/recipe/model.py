"""
레시피 편집 연산

모든 함수는 기존 Recipe 를 변경하지 않고 새 Recipe 를 돌려준다.
범위를 벗어난 재료 인덱스(음수 포함)는 아무 것도 바꾸지 않는다.
"""

from typing import Any, Union

from app.enums import DEFAULT_UNIT
from app.recipe.schema import Ingredient, IngredientField, Recipe


def new_recipe() -> Recipe:
    return Recipe()


def set_name(recipe: Recipe, name: str) -> Recipe:
    return recipe.model_copy(update={"name": name})


def set_instructions(recipe: Recipe, text: str) -> Recipe:
    return recipe.model_copy(update={"instructions": text})


def set_preparation_time(recipe: Recipe, value: float) -> Recipe:
    return recipe.model_copy(update={"preparation_time": value})


def has_ingredient(recipe: Recipe, index: int) -> bool:
    return 0 <= index < len(recipe.ingredients)


def add_ingredient(recipe: Recipe) -> Recipe:
    blank = Ingredient(name="", quantity=0, unit=DEFAULT_UNIT)
    return recipe.model_copy(update={"ingredients": recipe.ingredients + (blank,)})


def remove_ingredient(recipe: Recipe, index: int) -> Recipe:
    if not has_ingredient(recipe, index):
        return recipe

    ingredients = recipe.ingredients[:index] + recipe.ingredients[index + 1:]
    return recipe.model_copy(update={"ingredients": ingredients})


def set_ingredient_field(
    recipe: Recipe,
    index: int,
    field: Union[IngredientField, str],
    value: Any,
) -> Recipe:
    # 허용되지 않은 필드명은 ValueError
    field = IngredientField(field)

    if not has_ingredient(recipe, index):
        return recipe

    current = recipe.ingredients[index]
    updated = Ingredient.model_validate({**current.model_dump(), field.value: value})

    ingredients = tuple(
        updated if position == index else ingredient
        for position, ingredient in enumerate(recipe.ingredients)
    )
    return recipe.model_copy(update={"ingredients": ingredients})
