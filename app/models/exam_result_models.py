from decimal import InvalidOperation

from sqlalchemy import (
    CheckConstraint,
    Column,
    Computed,
    Date,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import relationship, validates

from app.core.exceptions import ConstraintViolation
from app.db.database import Base
from app.utils.grading import (
    MARKS_MAX,
    MARKS_PRECISION,
    MARKS_SCALE,
    grade_sql_expression,
    to_marks,
)


class ExamResult(Base):
    __tablename__ = "exam_results"

    result_id = Column(Integer, primary_key=True, autoincrement=True)
    student_id = Column(
        String, ForeignKey("student_details.student_id", ondelete="CASCADE"), nullable=True
    )
    subject_id = Column(
        String, ForeignKey("subject.subject_id", ondelete="CASCADE"), nullable=True
    )
    exam_date = Column(Date, nullable=False)
    marks_obtained = Column(Numeric(MARKS_PRECISION, MARKS_SCALE), nullable=False)
    max_marks = Column(Numeric(MARKS_PRECISION, MARKS_SCALE), nullable=False)

    # Stored generated column, derived by the engine on every write of marks
    grade = Column(String, Computed(grade_sql_expression(), persisted=True))

    student = relationship("StudentDetails", back_populates="exam_results")
    subject = relationship("Subject", back_populates="exam_results")

    __table_args__ = (
        CheckConstraint(marks_obtained >= 0, name="marks_obtained_non_negative"),
        CheckConstraint(max_marks > 0, name="max_marks_positive"),
        Index("idx_exam_results_student", "student_id"),
        Index("idx_exam_results_subject", "subject_id"),
    )

    def _checked_marks(self, key, value):
        if value is None:
            raise ConstraintViolation(f"{key} is required", self.__tablename__, (key,))
        try:
            marks = to_marks(value)
        except (InvalidOperation, TypeError, ValueError):
            raise ConstraintViolation(
                f"{key} must be a decimal number, got {value!r}", self.__tablename__, (key,)
            )
        if marks > MARKS_MAX:
            raise ConstraintViolation(
                f"{key} must not exceed {MARKS_MAX}", self.__tablename__, (key,)
            )
        return marks

    @validates("marks_obtained")
    def validate_marks_obtained(self, key, value):
        marks = self._checked_marks(key, value)
        if marks < 0:
            raise ConstraintViolation(
                "marks_obtained must be >= 0", self.__tablename__, (key,)
            )
        return marks

    @validates("max_marks")
    def validate_max_marks(self, key, value):
        marks = self._checked_marks(key, value)
        if marks <= 0:
            raise ConstraintViolation("max_marks must be > 0", self.__tablename__, (key,))
        return marks

    @validates("grade")
    def validate_grade(self, key, value):
        raise ConstraintViolation(
            "grade is derived from marks_obtained and cannot be set",
            self.__tablename__,
            (key,),
        )

    def __repr__(self):
        return (
            f"<ExamResult {self.result_id} {self.student_id}/{self.subject_id} "
            f"{self.marks_obtained}/{self.max_marks} grade={self.grade}>"
        )
