from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError
from sqlalchemy import func, insert, select
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import (
    ConstraintViolation,
    ReferentialIntegrityViolation,
    UniquenessViolation,
    translate_integrity_error,
)
from app.crud.class_crud import create_class
from app.crud.exam_result_crud import create_exam_result, get_exam_result, update_exam_result
from app.crud.parent_crud import create_parent
from app.crud.student_crud import create_student, get_student, update_student
from app.crud.subject_crud import create_subject
from app.crud.subject_tutor_crud import create_subject_tutor, list_subject_tutors
from app.crud.teacher_crud import create_teacher
from app.crud.user_login_crud import create_user_login
from app.models.exam_result_models import ExamResult
from app.schemas.class_schemas import ClassCreate
from app.schemas.exam_result_schemas import ExamResultCreate, ExamResultUpdate
from app.schemas.parent_schemas import ParentCreate
from app.schemas.student_schemas import StudentCreate, StudentUpdate
from app.schemas.subject_schemas import SubjectCreate
from app.schemas.subject_tutor_schemas import SubjectTutorCreate
from app.schemas.teacher_schemas import TeacherCreate
from app.schemas.user_login_schemas import UserLoginCreate
from app.tests.factories import exam


def _count(db, model):
    return db.scalar(select(func.count()).select_from(model))


# ---------------------------------------------------------------- uniqueness


def test_duplicate_roll_number_in_same_class_is_rejected(db, school):
    with pytest.raises(UniquenessViolation) as exc_info:
        create_student(db, StudentCreate(student_id="S2", class_id="C1", roll_no="01"))

    assert exc_info.value.table == "student_details"
    assert set(exc_info.value.columns) == {"roll_no", "class_id"}
    assert get_student(db, "S2") is None


def test_same_roll_number_in_another_class_is_accepted(db, school):
    create_class(db, ClassCreate(class_id="C2", class_year="2025"))
    student = create_student(db, StudentCreate(student_id="S2", class_id="C2", roll_no="01"))
    assert student.roll_no == "01"


def test_moving_student_onto_taken_roll_number_is_rejected(db, school):
    create_student(db, StudentCreate(student_id="S2", class_id="C1", roll_no="02"))

    with pytest.raises(UniquenessViolation):
        update_student(db, "S2", StudentUpdate(roll_no="01"))

    assert get_student(db, "S2").roll_no == "02"


def test_duplicate_primary_key_is_rejected(db, school):
    with pytest.raises(UniquenessViolation) as exc_info:
        create_teacher(db, TeacherCreate(teacher_id="T1"))
    assert exc_info.value.columns == ("teacher_id",)


def test_user_login_email_is_unique(db):
    create_user_login(db, UserLoginCreate(user_id="u1", email_id="a@example.com"))

    with pytest.raises(UniquenessViolation) as exc_info:
        create_user_login(db, UserLoginCreate(user_id="u2", email_id="a@example.com"))

    assert exc_info.value.columns == ("email_id",)


@pytest.mark.parametrize("column", ["email_id", "registration_id"])
def test_teacher_unique_columns(db, school, column):
    values = {"email_id": "meera.rao@school.example.com", "registration_id": "REG-T-001"}
    with pytest.raises(UniquenessViolation) as exc_info:
        create_teacher(db, TeacherCreate(teacher_id="T2", **{column: values[column]}))
    assert exc_info.value.columns == (column,)


@pytest.mark.parametrize("column", ["email_id", "registration_id"])
def test_student_unique_columns(db, school, column):
    values = {"email_id": "kavya.iyer@school.example.com", "registration_id": "ADM-2020-001"}
    with pytest.raises(UniquenessViolation):
        create_student(db, StudentCreate(student_id="S9", roll_no="09", class_id="C1", **{column: values[column]}))


def test_parent_emails_are_independent_uniqueness_domains(db, school):
    # the same address may be a father's email on one row and a mother's on another
    create_parent(db, ParentCreate(parent_id="P2", mother_email_id="arun.iyer@example.com"))

    with pytest.raises(UniquenessViolation) as exc_info:
        create_parent(db, ParentCreate(parent_id="P3", father_email_id="arun.iyer@example.com"))
    assert exc_info.value.columns == ("father_email_id",)

    with pytest.raises(UniquenessViolation) as exc_info:
        create_parent(db, ParentCreate(parent_id="P4", mother_email_id="lata.iyer@example.com"))
    assert exc_info.value.columns == ("mother_email_id",)


def test_duplicate_subject_tutor_triples_are_permitted(db, school):
    create_subject_tutor(db, SubjectTutorCreate(subject_id="SUB1", teacher_id="T1", class_id="C1"))
    assert len(list_subject_tutors(db, subject_id="SUB1", teacher_id="T1", class_id="C1")) == 2


# ------------------------------------------------------- referential integrity


def test_student_with_unknown_class_is_rejected(db, school):
    with pytest.raises(ReferentialIntegrityViolation):
        create_student(db, StudentCreate(student_id="S2", class_id="NOPE", roll_no="02"))
    assert get_student(db, "S2") is None


def test_result_with_unknown_subject_is_rejected(db, school):
    before = _count(db, ExamResult)
    with pytest.raises(ReferentialIntegrityViolation):
        create_exam_result(db, exam(subject_id="MISSING"))
    assert _count(db, ExamResult) == before


def test_class_with_unknown_teacher_is_rejected(db):
    with pytest.raises(ReferentialIntegrityViolation):
        create_class(db, ClassCreate(class_id="C9", class_teacher="GHOST"))


def test_class_without_teacher_is_accepted(db):
    assert create_class(db, ClassCreate(class_id="C9")).class_teacher is None


def test_subject_head_must_exist(db):
    with pytest.raises(ReferentialIntegrityViolation):
        create_subject(db, SubjectCreate(subject_id="SUB9", subject_head="GHOST"))


# ---------------------------------------------------------- exam result bounds


@pytest.mark.parametrize(
    "field, value",
    [
        ("marks_obtained", "-0.01"),
        ("max_marks", "0"),
        ("max_marks", "-5"),
        ("marks_obtained", "1000.00"),
        ("marks_obtained", "85.125"),
    ],
)
def test_schema_rejects_out_of_range_marks(field, value):
    data = dict(
        student_id="S1",
        subject_id="SUB1",
        exam_date=date(2025, 3, 14),
        marks_obtained=Decimal("50"),
        max_marks=Decimal("100"),
    )
    data[field] = Decimal(value)
    with pytest.raises(ValidationError):
        ExamResultCreate(**data)


def test_schema_does_not_accept_grade():
    with pytest.raises(ValidationError):
        ExamResultCreate(
            exam_date=date(2025, 3, 14),
            marks_obtained=Decimal("10"),
            max_marks=Decimal("100"),
            grade="A+",
        )


@pytest.mark.parametrize(
    "kwargs",
    [
        {"marks_obtained": Decimal("-1"), "max_marks": Decimal("100")},
        {"marks_obtained": Decimal("10"), "max_marks": Decimal("0")},
        {"marks_obtained": Decimal("1000"), "max_marks": Decimal("100")},
        {"marks_obtained": None, "max_marks": Decimal("100")},
        {"marks_obtained": "abc", "max_marks": Decimal("100")},
    ],
)
def test_model_rejects_invalid_marks_before_any_write(kwargs):
    with pytest.raises(ConstraintViolation):
        ExamResult(student_id="S1", subject_id="SUB1", exam_date=date(2025, 1, 1), **kwargs)


def test_model_rejects_direct_grade_assignment(db, school):
    result = get_exam_result(db, school.result_id)
    with pytest.raises(ConstraintViolation) as exc_info:
        result.grade = "A+"
    assert exc_info.value.columns == ("grade",)


def test_update_with_negative_marks_leaves_row_unchanged(db, school):
    with pytest.raises(ConstraintViolation):
        update_exam_result(db, school.result_id, ExamResultUpdate.model_construct(marks_obtained=Decimal("-3")))

    result = get_exam_result(db, school.result_id)
    assert result.marks_obtained == Decimal("85.00")
    assert result.grade == "A"


def test_database_check_constraints_back_up_the_model(db, school):
    stmt = insert(ExamResult.__table__).values(
        student_id="S1",
        subject_id="SUB1",
        exam_date=date(2025, 5, 1),
        marks_obtained=Decimal("-1"),
        max_marks=Decimal("100"),
    )
    with pytest.raises(IntegrityError) as exc_info:
        db.execute(stmt)
    db.rollback()

    error = translate_integrity_error(exc_info.value)
    assert isinstance(error, ConstraintViolation)
    assert error.table == "exam_results"
    assert _count(db, ExamResult) == 1


def test_exam_date_is_required():
    with pytest.raises(ValidationError):
        ExamResultCreate(marks_obtained=Decimal("10"), max_marks=Decimal("100"))
