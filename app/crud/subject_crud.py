# Subject CRUD operations
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.base import DEFAULT_LIMIT, create_from_payload, delete_by_key, paginate, update_from_payload
from app.models.subject_models import Subject
from app.schemas.subject_schemas import SubjectCreate, SubjectUpdate


def create_subject(db: Session, payload: SubjectCreate) -> Subject:
    return create_from_payload(db, Subject, payload)


def get_subject(db: Session, subject_id: str) -> Optional[Subject]:
    return db.get(Subject, subject_id)


def list_subjects(
    db: Session,
    class_year: Optional[str] = None,
    subject_head: Optional[str] = None,
    skip: int = 0,
    limit: int = DEFAULT_LIMIT,
) -> List[Subject]:
    q = db.query(Subject)
    if class_year is not None:
        q = q.filter(Subject.class_year == class_year)
    if subject_head is not None:
        q = q.filter(Subject.subject_head == subject_head)
    return paginate(q.order_by(Subject.subject_id), skip, limit)


def update_subject(db: Session, subject_id: str, payload: SubjectUpdate) -> Subject:
    return update_from_payload(db, Subject, subject_id, payload)


def delete_subject(db: Session, subject_id: str) -> None:
    """Cascades to the subject's tutor mappings and exam results."""
    delete_by_key(db, Subject, subject_id)
