# ParentDetails CRUD operations
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.crud.base import DEFAULT_LIMIT, create_from_payload, delete_by_key, paginate, update_from_payload
from app.models.parent_models import ParentDetails
from app.schemas.parent_schemas import ParentCreate, ParentUpdate


def create_parent(db: Session, payload: ParentCreate) -> ParentDetails:
    return create_from_payload(db, ParentDetails, payload)


def get_parent(db: Session, parent_id: str) -> Optional[ParentDetails]:
    return db.get(ParentDetails, parent_id)


def get_parent_by_email(db: Session, email_id: str) -> Optional[ParentDetails]:
    """Matches either the father's or the mother's email."""
    return (
        db.query(ParentDetails)
        .filter(
            or_(
                ParentDetails.father_email_id == email_id,
                ParentDetails.mother_email_id == email_id,
            )
        )
        .first()
    )


def list_parents(db: Session, skip: int = 0, limit: int = DEFAULT_LIMIT) -> List[ParentDetails]:
    return paginate(db.query(ParentDetails).order_by(ParentDetails.parent_id), skip, limit)


def update_parent(db: Session, parent_id: str, payload: ParentUpdate) -> ParentDetails:
    return update_from_payload(db, ParentDetails, parent_id, payload)


def delete_parent(db: Session, parent_id: str) -> None:
    """Deleting a parent cascades to their students and those students' results."""
    delete_by_key(db, ParentDetails, parent_id)
