from typing import Dict, Union

from app.enums import RECOGNIZED_UNITS, MeasurementUnit
from app.recipe.schema import Recipe


def calculate_total_quantity(recipe: Recipe, unit: Union[MeasurementUnit, str]) -> float:
    """단위가 정확히 일치하는(대소문자 구분) 재료의 수량 합계. 없으면 0."""
    return sum(
        ingredient.quantity
        for ingredient in recipe.ingredients
        if ingredient.unit == unit
    )


def calculate_totals(recipe: Recipe) -> Dict[MeasurementUnit, float]:
    return {unit: calculate_total_quantity(recipe, unit) for unit in RECOGNIZED_UNITS}
