import logging
from typing import Any, List, Optional

from pydantic import ValidationError

from app.recipe import model
from app.recipe.aggregation import calculate_totals
from app.recipe.exception import RecipeErrorCode, RecipeException
from app.recipe.repository import RecipeRepository
from app.recipe.schema import (
    DraftResponse,
    IngredientField,
    Recipe,
    RecipeSummary,
    SubmitResponse,
)
from app.recipe.session import RecipeSession
from app.recipe.validator import validate_recipe


class RecipeService:
    def __init__(self, session: RecipeSession, repository: RecipeRepository):
        self.logger = logging.getLogger(__name__)
        self.session = session
        self.repository = repository

    def __require_ingredient(self, index: int) -> None:
        if not model.has_ingredient(self.session.recipe, index):
            self.logger.warning(
                f"존재하지 않는 재료 인덱스입니다. index={index}, count={len(self.session.recipe.ingredients)}"
            )
            raise RecipeException(RecipeErrorCode.INGREDIENT_NOT_FOUND, status_code=404)

    def draft(self) -> DraftResponse:
        recipe = self.session.recipe
        return DraftResponse(recipe=recipe, totals=calculate_totals(recipe))

    def update(
        self,
        name: Optional[str] = None,
        instructions: Optional[str] = None,
        preparation_time: Optional[float] = None,
    ) -> DraftResponse:
        recipe = self.session.recipe
        if name is not None:
            recipe = model.set_name(recipe, name)
        if instructions is not None:
            recipe = model.set_instructions(recipe, instructions)
        if preparation_time is not None:
            recipe = model.set_preparation_time(recipe, preparation_time)

        self.session.replace(recipe)
        return self.draft()

    def add_ingredient(self) -> DraftResponse:
        self.session.replace(model.add_ingredient(self.session.recipe))
        return self.draft()

    def remove_ingredient(self, index: int) -> DraftResponse:
        self.__require_ingredient(index)
        self.session.replace(model.remove_ingredient(self.session.recipe, index))
        return self.draft()

    def update_ingredient(self, index: int, field: IngredientField, value: Any) -> DraftResponse:
        self.__require_ingredient(index)
        try:
            recipe = model.set_ingredient_field(self.session.recipe, index, field, value)
        except ValidationError as e:
            self.logger.warning(f"재료 값이 올바르지 않습니다. index={index}, field={field.value}, error={e}")
            raise RecipeException(RecipeErrorCode.INVALID_INGREDIENT_VALUE, status_code=422)

        self.session.replace(recipe)
        return self.draft()

    def submit(self) -> SubmitResponse:
        recipe = self.session.recipe
        report = validate_recipe(recipe)

        if not report.is_valid:
            self.logger.info(f"레시피 제출 실패 | errors={report.model_dump(exclude_defaults=True)}")
            return SubmitResponse(valid=False, errors=report)

        self.logger.info(f"레시피 제출 성공 | name={recipe.name!r}")
        return SubmitResponse(
            valid=True,
            errors=report,
            summary=RecipeSummary(recipe=recipe, totals=calculate_totals(recipe)),
        )

    def save(self) -> int:
        # 검증 여부와 관계없이 저장한다
        return self.repository.save_recipe(self.session.recipe)

    def reset(self) -> DraftResponse:
        self.session.reset()
        return self.draft()

    def saved_recipes(self) -> List[Recipe]:
        return self.repository.list_recipes()
