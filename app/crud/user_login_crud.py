# UserLogin CRUD operations
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.base import DEFAULT_LIMIT, create_from_payload, delete_by_key, paginate, update_from_payload
from app.models.user_login_models import UserLogin
from app.schemas.user_login_schemas import UserLoginCreate, UserLoginUpdate


def create_user_login(db: Session, payload: UserLoginCreate) -> UserLogin:
    return create_from_payload(db, UserLogin, payload)


def get_user_login(db: Session, user_id: str) -> Optional[UserLogin]:
    return db.get(UserLogin, user_id)


def get_user_login_by_email(db: Session, email_id: str) -> Optional[UserLogin]:
    return db.query(UserLogin).filter(UserLogin.email_id == email_id).first()


def list_user_logins(db: Session, skip: int = 0, limit: int = DEFAULT_LIMIT) -> List[UserLogin]:
    return paginate(db.query(UserLogin).order_by(UserLogin.user_id), skip, limit)


def update_user_login(db: Session, user_id: str, payload: UserLoginUpdate) -> UserLogin:
    return update_from_payload(db, UserLogin, user_id, payload)


def delete_user_login(db: Session, user_id: str) -> None:
    delete_by_key(db, UserLogin, user_id)
