# SubjectTutor CRUD operations
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.base import DEFAULT_LIMIT, create_from_payload, delete_by_key, paginate, update_from_payload
from app.models.subject_tutor_models import SubjectTutor
from app.schemas.subject_tutor_schemas import SubjectTutorCreate, SubjectTutorUpdate


def create_subject_tutor(db: Session, payload: SubjectTutorCreate) -> SubjectTutor:
    # duplicate (subject, teacher, class) triples are accepted
    return create_from_payload(db, SubjectTutor, payload)


def get_subject_tutor(db: Session, row_id: int) -> Optional[SubjectTutor]:
    return db.get(SubjectTutor, row_id)


def list_subject_tutors(
    db: Session,
    subject_id: Optional[str] = None,
    teacher_id: Optional[str] = None,
    class_id: Optional[str] = None,
    skip: int = 0,
    limit: int = DEFAULT_LIMIT,
) -> List[SubjectTutor]:
    q = db.query(SubjectTutor)
    if subject_id is not None:
        q = q.filter(SubjectTutor.subject_id == subject_id)
    if teacher_id is not None:
        q = q.filter(SubjectTutor.teacher_id == teacher_id)
    if class_id is not None:
        q = q.filter(SubjectTutor.class_id == class_id)
    return paginate(q.order_by(SubjectTutor.row_id), skip, limit)


def update_subject_tutor(db: Session, row_id: int, payload: SubjectTutorUpdate) -> SubjectTutor:
    return update_from_payload(db, SubjectTutor, row_id, payload)


def delete_subject_tutor(db: Session, row_id: int) -> None:
    delete_by_key(db, SubjectTutor, row_id)
