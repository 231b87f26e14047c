"""Complexity tier and effort estimate.

The weights and thresholds are a fixed estimation policy shared with existing
project plans. Changing them changes every historical estimate.
"""

from dataclasses import dataclass

from bo_extractor.processor.models import Complexity

FIELD_WEIGHT = 0.5
PARAMETER_WEIGHT = 2.0
FORMULA_WEIGHT = 1.5
TABLE_WEIGHT = 1.0
MACRO_CODE_BONUS = 10.0

COMPLEX_THRESHOLD = 30.0
MEDIUM_THRESHOLD = 15.0

DAYS_BY_COMPLEXITY: dict[Complexity, float] = {
    Complexity.SIMPLE: 0.5,
    Complexity.MEDIUM: 1.5,
    Complexity.COMPLEX: 3.0,
}


@dataclass(frozen=True)
class Classification:
    score: float
    complexity: Complexity
    days: float


def score(
    field_count: int,
    parameter_count: int,
    formula_count: int,
    table_count: int,
    has_vba: bool,
) -> float:
    return (
        field_count * FIELD_WEIGHT
        + parameter_count * PARAMETER_WEIGHT
        + formula_count * FORMULA_WEIGHT
        + table_count * TABLE_WEIGHT
        + (MACRO_CODE_BONUS if has_vba else 0.0)
    )


def complexity_for(value: float) -> Complexity:
    if value > COMPLEX_THRESHOLD:
        return Complexity.COMPLEX
    if value > MEDIUM_THRESHOLD:
        return Complexity.MEDIUM
    return Complexity.SIMPLE


def classify(
    field_count: int,
    parameter_count: int,
    formula_count: int,
    table_count: int,
    has_vba: bool,
) -> Classification:
    value = score(field_count, parameter_count, formula_count, table_count, has_vba)
    complexity = complexity_for(value)
    return Classification(score=value, complexity=complexity, days=DAYS_BY_COMPLEXITY[complexity])
