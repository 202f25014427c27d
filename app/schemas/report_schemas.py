from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class StudentGradeRow(BaseModel):
    """One row of student_grades_view."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    student_id: str
    student_first_name: Optional[str] = None
    student_last_name: Optional[str] = None
    subject_name: Optional[str] = None
    exam_date: date
    marks_obtained: Decimal
    max_marks: Decimal
    grade: str


class ReportCard(BaseModel):
    student_id: str
    student_first_name: Optional[str] = None
    student_last_name: Optional[str] = None
    rows: List[StudentGradeRow] = []


class GradeDistribution(BaseModel):
    subject_name: Optional[str] = None
    counts: Dict[str, int] = {}
    total: int = 0
