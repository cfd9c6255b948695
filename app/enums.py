from enum import Enum


class MeasurementUnit(str, Enum):
    """인식 가능한 재료 단위 (순서 유지: 첫 항목이 새 재료의 기본 단위)"""
    GRAMS = "grams"
    CUPS = "cups"
    TABLESPOONS = "tablespoons"
    TEASPOONS = "teaspoons"


# 선언 순서 그대로의 단위 목록
RECOGNIZED_UNITS = list(MeasurementUnit)
DEFAULT_UNIT = RECOGNIZED_UNITS[0]
