from enum import Enum

from app.exception import RecipeFormException


class RecipeErrorCode(Enum):
    INGREDIENT_NOT_FOUND = ("RECIPE_001", "해당 위치의 재료를 찾을 수 없습니다.")
    INVALID_INGREDIENT_VALUE = ("RECIPE_002", "재료 값이 올바르지 않습니다.")

    def __init__(self, code: str, message: str):
        self._code = code
        self._message = message

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

class RecipeException(RecipeFormException):
    def __init__(self, code: Enum, *, status_code: int = 400):
        super().__init__(code, status_code=status_code)
        self.code = code
