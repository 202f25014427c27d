# Import every model so Base.metadata holds all tables (and the view DDL hooks)
# before mappers are configured.
from app.models.user_login_models import UserLogin
from app.models.parent_models import ParentDetails
from app.models.teacher_models import Teacher
from app.models.class_models import ClassDetails
from app.models.student_models import StudentDetails
from app.models.subject_models import Subject
from app.models.subject_tutor_models import SubjectTutor
from app.models.exam_result_models import ExamResult
from app.models.student_grades_view import student_grades_view

__all__ = [
    "UserLogin",
    "ParentDetails",
    "Teacher",
    "ClassDetails",
    "StudentDetails",
    "Subject",
    "SubjectTutor",
    "ExamResult",
    "student_grades_view",
]
