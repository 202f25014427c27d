"""
student_grades_view: read-only reporting projection of
exam_results ⋈ student_details ⋈ subject.

The view stores nothing. It is (re)created right after the tables whenever
the schema is provisioned and dropped before them, so it always reads the
live base tables.
"""
from sqlalchemy import Date, Numeric, String, column, event, select, table
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.schema import ExecutableDDLElement

from app.db.database import Base
from app.models.exam_result_models import ExamResult
from app.models.student_models import StudentDetails
from app.models.subject_models import Subject
from app.utils.grading import MARKS_PRECISION, MARKS_SCALE

VIEW_NAME = "student_grades_view"


class CreateView(ExecutableDDLElement):
    def __init__(self, name, selectable):
        self.name = name
        self.selectable = selectable


class DropView(ExecutableDDLElement):
    def __init__(self, name):
        self.name = name


@compiles(CreateView)
def _compile_create_view(element, compiler, **kw):
    body = compiler.sql_compiler.process(element.selectable, literal_binds=True)
    return f"CREATE VIEW {compiler.preparer.quote(element.name)} AS {body}"


@compiles(DropView)
def _compile_drop_view(element, compiler, **kw):
    return f"DROP VIEW IF EXISTS {compiler.preparer.quote(element.name)}"


student_grades_select = (
    select(
        StudentDetails.student_id,
        StudentDetails.first_name.label("student_first_name"),
        StudentDetails.last_name.label("student_last_name"),
        Subject.subject_name,
        ExamResult.exam_date,
        ExamResult.marks_obtained,
        ExamResult.max_marks,
        ExamResult.grade,
    )
    .select_from(ExamResult)
    .join(StudentDetails, ExamResult.student_id == StudentDetails.student_id)
    .join(Subject, ExamResult.subject_id == Subject.subject_id)
)

# Queryable handle on the view; not part of Base.metadata so create_all
# never tries to build it as a table.
student_grades_view = table(
    VIEW_NAME,
    column("student_id", String),
    column("student_first_name", String),
    column("student_last_name", String),
    column("subject_name", String),
    column("exam_date", Date),
    column("marks_obtained", Numeric(MARKS_PRECISION, MARKS_SCALE)),
    column("max_marks", Numeric(MARKS_PRECISION, MARKS_SCALE)),
    column("grade", String),
)

event.listen(Base.metadata, "after_create", DropView(VIEW_NAME))
event.listen(Base.metadata, "after_create", CreateView(VIEW_NAME, student_grades_select))
event.listen(Base.metadata, "before_drop", DropView(VIEW_NAME))
