# Shared write helpers: every write commits on success, or rolls back and
# raises the translated domain error.
import logging
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    NotFound,
    SchoolRecordsError,
    UniquenessViolation,
    translate_integrity_error,
)
from app.db.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

DEFAULT_LIMIT = 100


def _pk_column(model: Type[Base]) -> str:
    return inspect(model).primary_key[0].name


def commit_or_raise(db: Session, action: str) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        error = translate_integrity_error(exc)
        logger.warning("%s rejected: %r", action, error)
        raise error from exc


def ensure_key_free(db: Session, model: Type[Base], key: Any) -> None:
    if db.get(model, key) is not None:
        raise UniquenessViolation(
            f"{model.__tablename__} {key!r} already exists",
            model.__tablename__,
            (_pk_column(model),),
        )


def get_or_raise(db: Session, model: Type[ModelT], key: Any) -> ModelT:
    obj = db.get(model, key)
    if obj is None:
        raise NotFound(
            f"{model.__tablename__} {key!r} not found",
            model.__tablename__,
            (_pk_column(model),),
        )
    return obj


def create_from_payload(db: Session, model: Type[ModelT], payload: BaseModel) -> ModelT:
    data = payload.model_dump()
    key_column = _pk_column(model)
    if data.get(key_column) is not None:
        ensure_key_free(db, model, data[key_column])

    obj = model(**data)
    db.add(obj)
    commit_or_raise(db, f"insert into {model.__tablename__}")
    db.refresh(obj)
    return obj


def update_from_payload(
    db: Session, model: Type[ModelT], key: Any, payload: BaseModel
) -> ModelT:
    obj = get_or_raise(db, model, key)
    try:
        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(obj, field, value)
    except SchoolRecordsError:
        # attribute validators reject before anything is flushed
        db.rollback()
        raise

    commit_or_raise(db, f"update of {model.__tablename__} {key!r}")
    db.refresh(obj)
    return obj


def delete_by_key(db: Session, model: Type[Base], key: Any) -> None:
    obj = get_or_raise(db, model, key)
    db.delete(obj)
    commit_or_raise(db, f"delete from {model.__tablename__} {key!r}")
    logger.info("deleted %s %r", model.__tablename__, key)


def paginate(query, skip: int = 0, limit: Optional[int] = DEFAULT_LIMIT):
    query = query.offset(skip)
    if limit is not None:
        query = query.limit(limit)
    return query.all()
