# app/services/report_service.py
"""
Read-only reporting over student_grades_view.

Every call issues a single SELECT against the view, so the rows reflect the
base tables as of that statement. Empty results are valid outcomes.
"""
import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.models.student_grades_view import student_grades_view as v
from app.schemas.report_schemas import GradeDistribution, ReportCard, StudentGradeRow
from app.utils.grading import FAIL_GRADE, GRADE_BANDS

logger = logging.getLogger(__name__)

GRADE_ORDER = [grade for _, grade in GRADE_BANDS] + [FAIL_GRADE]


def list_student_grades(
    db: Session,
    student_id: Optional[str] = None,
    subject_name: Optional[str] = None,
    grade: Optional[str] = None,
) -> List[StudentGradeRow]:
    stmt = select(v)
    if student_id is not None:
        stmt = stmt.where(v.c.student_id == student_id)
    if subject_name is not None:
        stmt = stmt.where(v.c.subject_name == subject_name)
    if grade is not None:
        stmt = stmt.where(v.c.grade == grade)
    stmt = stmt.order_by(v.c.student_id, v.c.exam_date, v.c.subject_name)

    rows = db.execute(stmt).mappings().all()
    return [StudentGradeRow.model_validate(dict(row)) for row in rows]


def get_report_card(db: Session, student_id: str) -> Optional[ReportCard]:
    """All graded exams of one student, oldest first. None when the student has no rows."""
    rows = list_student_grades(db, student_id=student_id)
    if not rows:
        logger.info("report card: no graded exams for student_id=%s", student_id)
        return None

    first = rows[0]
    return ReportCard(
        student_id=student_id,
        student_first_name=first.student_first_name,
        student_last_name=first.student_last_name,
        rows=rows,
    )


def grade_distribution(db: Session, subject_name: Optional[str] = None) -> GradeDistribution:
    stmt = select(v.c.grade, func.count()).group_by(v.c.grade)
    if subject_name is not None:
        stmt = stmt.where(v.c.subject_name == subject_name)

    found = {grade: count for grade, count in db.execute(stmt).all()}
    counts = {grade: found.get(grade, 0) for grade in GRADE_ORDER}
    return GradeDistribution(
        subject_name=subject_name,
        counts=counts,
        total=sum(counts.values()),
    )
