import os
from dataclasses import dataclass
from datetime import date

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.crud.class_crud import create_class
from app.crud.exam_result_crud import create_exam_result
from app.crud.parent_crud import create_parent
from app.crud.student_crud import create_student
from app.crud.subject_crud import create_subject
from app.crud.subject_tutor_crud import create_subject_tutor
from app.crud.teacher_crud import create_teacher
from app.db.database import create_db_engine
from app.db.init_db import drop_schema, reset_schema
from app.schemas.class_schemas import ClassCreate
from app.schemas.parent_schemas import ParentCreate
from app.schemas.student_schemas import StudentCreate
from app.schemas.subject_schemas import SubjectCreate
from app.schemas.subject_tutor_schemas import SubjectTutorCreate
from app.schemas.teacher_schemas import TeacherCreate
from app.tests.factories import exam

# Point at a PostgreSQL database to run the suite against the production engine
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite://")
TEST_SCHEMA = "student_management_test"


@pytest.fixture
def engine():
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_db_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_db_engine(TEST_DATABASE_URL, schema=TEST_SCHEMA)

    reset_schema(engine, schema=TEST_SCHEMA)
    yield engine
    drop_schema(engine, schema=TEST_SCHEMA)
    engine.dispose()


@pytest.fixture
def schema_name(engine):
    """Namespace the test objects live in (None where the engine has no schemas)."""
    return TEST_SCHEMA if engine.dialect.name == "postgresql" else None


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@dataclass
class School:
    teacher_id: str = "T1"
    class_id: str = "C1"
    parent_id: str = "P1"
    student_id: str = "S1"
    subject_id: str = "SUB1"
    result_id: int = 0
    tutor_id: int = 0


@pytest.fixture
def school(db) -> School:
    """Teacher T1 heads class C1 and subject SUB1; student S1 has one result of 85.00."""
    create_teacher(
        db,
        TeacherCreate(
            teacher_id="T1",
            first_name="Meera",
            last_name="Rao",
            date_of_birth=date(1984, 6, 2),
            email_id="meera.rao@school.example.com",
            contact="+91-9800000001",
            registration_date=date(2015, 7, 1),
            registration_id="REG-T-001",
        ),
    )
    create_class(db, ClassCreate(class_id="C1", class_teacher="T1", class_year="2025"))
    create_parent(
        db,
        ParentCreate(
            parent_id="P1",
            father_first_name="Arun",
            father_last_name="Iyer",
            father_email_id="arun.iyer@example.com",
            mother_first_name="Lata",
            mother_last_name="Iyer",
            mother_email_id="lata.iyer@example.com",
        ),
    )
    create_student(
        db,
        StudentCreate(
            student_id="S1",
            first_name="Kavya",
            last_name="Iyer",
            date_of_birth=date(2012, 1, 9),
            class_id="C1",
            roll_no="01",
            email_id="kavya.iyer@school.example.com",
            parent_id="P1",
            registration_date=date(2020, 6, 1),
            registration_id="ADM-2020-001",
        ),
    )
    create_subject(
        db,
        SubjectCreate(subject_id="SUB1", subject_name="Mathematics", class_year="2025", subject_head="T1"),
    )
    tutor = create_subject_tutor(
        db, SubjectTutorCreate(subject_id="SUB1", teacher_id="T1", class_id="C1")
    )
    result = create_exam_result(db, exam())
    return School(result_id=result.result_id, tutor_id=tutor.row_id)
