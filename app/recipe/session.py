import logging

from app.recipe.model import new_recipe
from app.recipe.schema import Recipe


class RecipeSession:
    """현재 작성 중인 레시피 값을 보관한다. 값 자체는 불변이며 교체만 한다."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.recipe: Recipe = new_recipe()

    def replace(self, recipe: Recipe) -> Recipe:
        self.recipe = recipe
        return recipe

    def reset(self) -> Recipe:
        self.logger.info("새 레시피 작성을 시작합니다.")
        return self.replace(new_recipe())
