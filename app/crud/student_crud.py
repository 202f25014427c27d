# StudentDetails CRUD operations
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.base import DEFAULT_LIMIT, create_from_payload, delete_by_key, paginate, update_from_payload
from app.models.student_models import StudentDetails
from app.schemas.student_schemas import StudentCreate, StudentUpdate


def create_student(db: Session, payload: StudentCreate) -> StudentDetails:
    return create_from_payload(db, StudentDetails, payload)


def get_student(db: Session, student_id: str) -> Optional[StudentDetails]:
    return db.get(StudentDetails, student_id)


def get_student_by_roll(db: Session, class_id: str, roll_no: str) -> Optional[StudentDetails]:
    return (
        db.query(StudentDetails)
        .filter(
            StudentDetails.class_id == class_id,
            StudentDetails.roll_no == roll_no,
        )
        .first()
    )


def list_students(
    db: Session,
    class_id: Optional[str] = None,
    parent_id: Optional[str] = None,
    skip: int = 0,
    limit: int = DEFAULT_LIMIT,
) -> List[StudentDetails]:
    q = db.query(StudentDetails)
    if class_id is not None:
        q = q.filter(StudentDetails.class_id == class_id)
    if parent_id is not None:
        q = q.filter(StudentDetails.parent_id == parent_id)
    return paginate(q.order_by(StudentDetails.class_id, StudentDetails.roll_no), skip, limit)


def update_student(db: Session, student_id: str, payload: StudentUpdate) -> StudentDetails:
    return update_from_payload(db, StudentDetails, student_id, payload)


def delete_student(db: Session, student_id: str) -> None:
    """Cascades to the student's exam results."""
    delete_by_key(db, StudentDetails, student_id)
