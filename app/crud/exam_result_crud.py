# ExamResult CRUD operations
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.base import DEFAULT_LIMIT, create_from_payload, delete_by_key, paginate, update_from_payload
from app.models.exam_result_models import ExamResult
from app.schemas.exam_result_schemas import ExamResultCreate, ExamResultUpdate


def create_exam_result(db: Session, payload: ExamResultCreate) -> ExamResult:
    """Inserts the result; the returned row carries the grade derived by the database."""
    return create_from_payload(db, ExamResult, payload)


def get_exam_result(db: Session, result_id: int) -> Optional[ExamResult]:
    return db.get(ExamResult, result_id)


def list_exam_results(
    db: Session,
    student_id: Optional[str] = None,
    subject_id: Optional[str] = None,
    skip: int = 0,
    limit: int = DEFAULT_LIMIT,
) -> List[ExamResult]:
    q = db.query(ExamResult)
    if student_id is not None:
        q = q.filter(ExamResult.student_id == student_id)
    if subject_id is not None:
        q = q.filter(ExamResult.subject_id == subject_id)
    return paginate(q.order_by(ExamResult.exam_date, ExamResult.result_id), skip, limit)


def update_exam_result(db: Session, result_id: int, payload: ExamResultUpdate) -> ExamResult:
    """A new marks_obtained re-derives the grade in the same transaction."""
    return update_from_payload(db, ExamResult, result_id, payload)


def delete_exam_result(db: Session, result_id: int) -> None:
    delete_by_key(db, ExamResult, result_id)
