# app/core/exceptions.py
"""
Error taxonomy for the school records data layer.

Every write rejected by the storage engine surfaces as one of the classes
below. The session has always been rolled back by the time they are raised,
so prior state is untouched.
"""
from typing import Dict, Optional, Sequence, Tuple

from sqlalchemy.dialects.postgresql.base import PGDialect
from sqlalchemy.exc import IntegrityError


class SchoolRecordsError(Exception):
    def __init__(
        self,
        detail: str,
        table: Optional[str] = None,
        columns: Sequence[str] = (),
    ):
        super().__init__(detail)
        self.detail = detail
        self.table = table
        self.columns = tuple(columns)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(table={self.table!r}, "
            f"columns={self.columns!r}, detail={self.detail!r})"
        )


class UniquenessViolation(SchoolRecordsError):
    """A write collides with an existing primary key or unique value."""


class ReferentialIntegrityViolation(SchoolRecordsError):
    """A write references a missing parent, or a delete hits a restricting child."""


class ConstraintViolation(SchoolRecordsError):
    """A CHECK bound or NOT NULL requirement is violated."""


class NotFound(SchoolRecordsError):
    pass


# PostgreSQL SQLSTATE codes (class 23, integrity constraint violation)
PG_UNIQUE_VIOLATION = "23505"
PG_FOREIGN_KEY_VIOLATION = "23503"
PG_RESTRICT_VIOLATION = "23001"
PG_CHECK_VIOLATION = "23514"
PG_NOT_NULL_VIOLATION = "23502"


def _constraint_index() -> Dict[str, Tuple[str, Tuple[str, ...]]]:
    # rendered constraint name -> (table, columns)
    from app.db.database import Base

    # resolves naming-convention names exactly as the DDL renders them
    preparer = PGDialect().identifier_preparer

    index: Dict[str, Tuple[str, Tuple[str, ...]]] = {}
    for table in Base.metadata.tables.values():
        for constraint in table.constraints:
            name = preparer.format_constraint(constraint)
            if name:
                index[name.strip('"')] = (
                    table.name,
                    tuple(c.name for c in constraint.columns),
                )
    return index


def _parse_sqlite_columns(message: str) -> Tuple[Optional[str], Tuple[str, ...]]:
    # "UNIQUE constraint failed: student_details.roll_no, student_details.class_id"
    _, _, tail = message.partition(":")
    table = None
    columns = []
    for part in tail.split(","):
        part = part.strip()
        if "." not in part:
            continue
        table, column = part.split(".", 1)
        columns.append(column)
    return table, tuple(columns)


def _from_postgres(orig, message: str) -> SchoolRecordsError:
    diag = getattr(orig, "diag", None)
    constraint_name = getattr(diag, "constraint_name", None)
    table = getattr(diag, "table_name", None)
    columns: Tuple[str, ...] = ()

    if constraint_name:
        table, columns = _constraint_index().get(constraint_name, (table, ()))

    code = orig.pgcode
    if code == PG_UNIQUE_VIOLATION:
        return UniquenessViolation(message, table, columns)
    if code in (PG_FOREIGN_KEY_VIOLATION, PG_RESTRICT_VIOLATION):
        return ReferentialIntegrityViolation(message, table, columns)
    if code == PG_NOT_NULL_VIOLATION:
        column = getattr(diag, "column_name", None)
        return ConstraintViolation(message, table, (column,) if column else columns)
    return ConstraintViolation(message, table, columns)


def _from_sqlite(message: str) -> SchoolRecordsError:
    if message.startswith("UNIQUE constraint failed"):
        table, columns = _parse_sqlite_columns(message)
        return UniquenessViolation(message, table, columns)
    if message.startswith("FOREIGN KEY constraint failed"):
        return ReferentialIntegrityViolation(message)
    if message.startswith("NOT NULL constraint failed"):
        table, columns = _parse_sqlite_columns(message)
        return ConstraintViolation(message, table, columns)
    if message.startswith("CHECK constraint failed"):
        name = message.partition(":")[2].strip()
        table, columns = _constraint_index().get(name, (None, ()))
        return ConstraintViolation(message, table, columns)
    return ConstraintViolation(message)


def translate_integrity_error(exc: IntegrityError) -> SchoolRecordsError:
    """Map a driver-level IntegrityError onto the domain error taxonomy."""
    orig = exc.orig
    message = str(orig).strip()

    if getattr(orig, "pgcode", None):
        return _from_postgres(orig, message)
    return _from_sqlite(message)
