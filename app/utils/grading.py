# app/utils/grading.py
"""
Letter-grade banding for exam results.

The bands compare the raw `marks_obtained` value, not a percentage of
`max_marks`. The same table drives the pure Python function and the SQL
expression behind the stored `exam_results.grade` column, so both always agree.
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

# (lower bound inclusive, grade), evaluated high to low; first match wins
GRADE_BANDS = (
    (Decimal("90"), "A+"),
    (Decimal("80"), "A"),
    (Decimal("70"), "B"),
    (Decimal("60"), "C"),
    (Decimal("50"), "D"),
)
FAIL_GRADE = "F"

MARKS_PRECISION = 5
MARKS_SCALE = 2
MARKS_QUANTUM = Decimal("0.01")
MARKS_MAX = Decimal("999.99")

Number = Union[Decimal, int, float, str]


def to_marks(value: Number) -> Decimal:
    """Coerce to NUMERIC(5,2) semantics: two fractional digits, half-up."""
    if isinstance(value, float):
        value = repr(value)
    return Decimal(value).quantize(MARKS_QUANTUM, rounding=ROUND_HALF_UP)


def compute_grade(marks_obtained: Number) -> str:
    marks = to_marks(marks_obtained)
    for lower_bound, grade in GRADE_BANDS:
        if marks >= lower_bound:
            return grade
    return FAIL_GRADE


def grade_sql_expression(column_name: str = "marks_obtained") -> str:
    """CASE expression used as the generated-column definition."""
    branches = " ".join(
        f"WHEN {column_name} >= {bound} THEN '{grade}'" for bound, grade in GRADE_BANDS
    )
    return f"CASE {branches} ELSE '{FAIL_GRADE}' END"
