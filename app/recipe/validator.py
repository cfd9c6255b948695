from app.constants import ValidationConfig, ValidationMessages
from app.recipe.schema import Recipe, ValidationReport


def validate_recipe(recipe: Recipe) -> ValidationReport:
    """모든 규칙을 독립적으로 적용해 오류를 빠짐없이 모은다."""
    report = ValidationReport()

    if len(recipe.name) < ValidationConfig.MIN_RECIPE_NAME_LENGTH:
        report.name = ValidationMessages.RECIPE_NAME_TOO_SHORT

    for index, ingredient in enumerate(recipe.ingredients):
        if len(ingredient.name) < ValidationConfig.MIN_INGREDIENT_NAME_LENGTH:
            report.ingredients[index] = ValidationMessages.INGREDIENT_NAME_TOO_SHORT
        # 같은 재료에 둘 다 해당하면 수량 메시지가 덮어쓴다
        if ingredient.quantity <= 0:
            report.ingredients[index] = ValidationMessages.INGREDIENT_QUANTITY_NOT_POSITIVE

    if recipe.preparation_time <= 0:
        report.preparation_time = ValidationMessages.PREPARATION_TIME_NOT_POSITIVE

    return report


def is_valid(report: ValidationReport) -> bool:
    return report.is_valid
