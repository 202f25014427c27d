# ClassDetails CRUD operations
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.base import DEFAULT_LIMIT, create_from_payload, delete_by_key, paginate, update_from_payload
from app.models.class_models import ClassDetails
from app.schemas.class_schemas import ClassCreate, ClassUpdate


def create_class(db: Session, payload: ClassCreate) -> ClassDetails:
    return create_from_payload(db, ClassDetails, payload)


def get_class(db: Session, class_id: str) -> Optional[ClassDetails]:
    return db.get(ClassDetails, class_id)


def list_classes(
    db: Session,
    class_year: Optional[str] = None,
    class_teacher: Optional[str] = None,
    skip: int = 0,
    limit: int = DEFAULT_LIMIT,
) -> List[ClassDetails]:
    q = db.query(ClassDetails)
    if class_year is not None:
        q = q.filter(ClassDetails.class_year == class_year)
    if class_teacher is not None:
        q = q.filter(ClassDetails.class_teacher == class_teacher)
    return paginate(q.order_by(ClassDetails.class_id), skip, limit)


def update_class(db: Session, class_id: str, payload: ClassUpdate) -> ClassDetails:
    return update_from_payload(db, ClassDetails, class_id, payload)


def delete_class(db: Session, class_id: str) -> None:
    """Cascades to the class's students (and their results) and its subject tutors."""
    delete_by_key(db, ClassDetails, class_id)
