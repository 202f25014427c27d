# app/schemas/exam_result_schemas.py
from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# NUMERIC(5,2): 0.00 .. 999.99
MARKS_FIELD = dict(max_digits=5, decimal_places=2)


class ExamResultCreate(BaseModel):
    # grade is derived by the database; passing it is an error
    model_config = ConfigDict(extra="forbid")

    student_id: Optional[str] = None
    subject_id: Optional[str] = None
    exam_date: date
    marks_obtained: Decimal = Field(..., ge=0, **MARKS_FIELD)
    max_marks: Decimal = Field(..., gt=0, **MARKS_FIELD)


class ExamResultUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    student_id: Optional[str] = None
    subject_id: Optional[str] = None
    exam_date: Optional[date] = None
    marks_obtained: Optional[Decimal] = Field(None, ge=0, **MARKS_FIELD)
    max_marks: Optional[Decimal] = Field(None, gt=0, **MARKS_FIELD)


class ExamResultResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    result_id: int
    student_id: Optional[str] = None
    subject_id: Optional[str] = None
    exam_date: date
    marks_obtained: Decimal
    max_marks: Decimal
    grade: str
