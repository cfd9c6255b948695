from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from app.enums import DEFAULT_UNIT, MeasurementUnit


class IngredientField(str, Enum):
    """단일 재료에서 수정 가능한 필드"""
    NAME = "name"
    QUANTITY = "quantity"
    UNIT = "unit"


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="재료명")
    quantity: float = Field(0, description="수량")
    unit: MeasurementUnit = Field(DEFAULT_UNIT, description="단위")


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="레시피 이름")
    ingredients: Tuple[Ingredient, ...] = Field((), description="재료 목록 (순서 유지)")
    instructions: str = Field("", description="조리 방법")
    preparation_time: float = Field(0, description="준비 시간")


class ValidationReport(BaseModel):
    """레시피 검증 결과. 매 검증마다 새로 계산된다."""
    name: str = Field("", description="레시피 이름 오류")
    ingredients: Dict[int, str] = Field(default_factory=dict, description="재료 인덱스별 오류")
    instructions: str = Field("", description="조리 방법 오류 (현재 규칙에서는 항상 비어 있음)")
    preparation_time: str = Field("", description="준비 시간 오류")

    @property
    def is_valid(self) -> bool:
        # instructions 는 유효성 판단에 포함하지 않는다
        return not self.name and not self.preparation_time and not self.ingredients


class RecipeSummary(BaseModel):
    """제출 성공 시 보여줄 요약"""
    recipe: Recipe
    totals: Dict[MeasurementUnit, float] = Field(..., description="단위별 총 수량")


class DraftResponse(BaseModel):
    recipe: Recipe
    totals: Dict[MeasurementUnit, float] = Field(..., description="단위별 총 수량")


class RecipeUpdateRequest(BaseModel):
    """레시피 기본 필드 수정 요청 (지정한 필드만 반영)"""
    name: Optional[str] = Field(None, description="레시피 이름")
    instructions: Optional[str] = Field(None, description="조리 방법")
    preparation_time: Optional[float] = Field(None, description="준비 시간")


class IngredientUpdateRequest(BaseModel):
    field: IngredientField = Field(..., description="수정할 필드")
    value: Union[float, str] = Field(..., description="새 값")


class SubmitResponse(BaseModel):
    valid: bool
    errors: ValidationReport
    summary: Optional[RecipeSummary] = None


class SaveResponse(BaseModel):
    saved_count: int = Field(..., ge=1, description="저장 후 레시피 개수")


class RecipeListResponse(BaseModel):
    recipes: List[Recipe]


class UnitListResponse(BaseModel):
    units: List[MeasurementUnit]
