# Teacher CRUD operations
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.base import DEFAULT_LIMIT, create_from_payload, delete_by_key, paginate, update_from_payload
from app.models.teacher_models import Teacher
from app.schemas.teacher_schemas import TeacherCreate, TeacherUpdate


def create_teacher(db: Session, payload: TeacherCreate) -> Teacher:
    return create_from_payload(db, Teacher, payload)


def get_teacher(db: Session, teacher_id: str) -> Optional[Teacher]:
    return db.get(Teacher, teacher_id)


def get_teacher_by_registration_id(db: Session, registration_id: str) -> Optional[Teacher]:
    return db.query(Teacher).filter(Teacher.registration_id == registration_id).first()


def list_teachers(db: Session, skip: int = 0, limit: int = DEFAULT_LIMIT) -> List[Teacher]:
    return paginate(db.query(Teacher).order_by(Teacher.teacher_id), skip, limit)


def update_teacher(db: Session, teacher_id: str, payload: TeacherUpdate) -> Teacher:
    return update_from_payload(db, Teacher, teacher_id, payload)


def delete_teacher(db: Session, teacher_id: str) -> None:
    """
    Rejected with ReferentialIntegrityViolation while the teacher is still a
    class teacher, a subject head or a subject tutor. Unset class_teacher /
    subject_head (or remove the tutor rows) first.
    """
    delete_by_key(db, Teacher, teacher_id)
