"""
애플리케이션 전역 상수 정의
"""


class StorageConfig:
    """로컬 저장소 관련 설정"""
    RECIPES_KEY = "recipes"
    DEFAULT_STORE_PATH = "data/local_storage.json"
    ENCODING = "utf-8"


class ValidationConfig:
    """레시피 검증 기준"""
    MIN_RECIPE_NAME_LENGTH = 3
    MIN_INGREDIENT_NAME_LENGTH = 2


class ValidationMessages:
    """검증 메시지 (폼에 그대로 노출된다)"""
    RECIPE_NAME_TOO_SHORT = "Recipe name should be at least 3 characters"
    INGREDIENT_NAME_TOO_SHORT = "Ingredient name should be at least 2 characters"
    INGREDIENT_QUANTITY_NOT_POSITIVE = "Ingredient quantity should be greater than 0"
    PREPARATION_TIME_NOT_POSITIVE = "Preparation time should be a positive number"
