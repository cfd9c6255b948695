import json
import logging
from typing import Any, List

from pydantic import TypeAdapter, ValidationError

from app.constants import StorageConfig
from app.recipe.schema import Recipe
from app.storage.exception import StorageErrorCode, StorageException
from app.storage.store import KeyValueStore

_recipe_list = TypeAdapter(List[Recipe])


class RecipeRepository:
    """
    저장소의 "recipes" 키에 레시피를 순서대로 누적한다.

    저장 전에 검증하지 않는다. 저장된 값이 손상된 경우 빈 목록으로
    취급하지 않고 예외를 올려 기존 데이터를 덮어쓰지 않는다.
    """

    def __init__(self, store: KeyValueStore, key: str = StorageConfig.RECIPES_KEY):
        self.logger = logging.getLogger(__name__)
        self.store = store
        self.key = key

    def _load_raw(self) -> List[Any]:
        raw = self.store.get(self.key)
        if raw is None:
            return []

        try:
            recipes = json.loads(raw)
        except json.JSONDecodeError as e:
            self.logger.error(f"저장된 레시피 목록을 해석할 수 없습니다. key={self.key}, error={e}")
            raise StorageException(StorageErrorCode.STORAGE_CORRUPTED)

        if not isinstance(recipes, list):
            self.logger.error(f"저장된 레시피 값이 목록이 아닙니다. key={self.key}, type={type(recipes).__name__}")
            raise StorageException(StorageErrorCode.STORAGE_CORRUPTED)

        return recipes

    def save_recipe(self, recipe: Recipe) -> int:
        recipes = self._load_raw()
        recipes.append(recipe.model_dump(mode="json"))
        self.store.set(self.key, json.dumps(recipes, ensure_ascii=False))

        self.logger.info(f"레시피 저장 완료 | name={recipe.name!r} | total={len(recipes)}")
        return len(recipes)

    def list_recipes(self) -> List[Recipe]:
        try:
            return _recipe_list.validate_python(self._load_raw())
        except ValidationError as e:
            self.logger.error(f"저장된 레시피 형식이 올바르지 않습니다. key={self.key}, error={e}")
            raise StorageException(StorageErrorCode.STORAGE_CORRUPTED)
