from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship

from app.db.database import Base


class ClassDetails(Base):
    __tablename__ = "class_details"

    class_id = Column(String, primary_key=True)
    class_teacher = Column(
        String, ForeignKey("teachers.teacher_id", ondelete="RESTRICT"), nullable=True
    )
    class_year = Column(String, nullable=True)  # e.g. "2025"

    teacher = relationship("Teacher", back_populates="classes")

    students = relationship(
        "StudentDetails",
        back_populates="class_details",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    subject_tutors = relationship(
        "SubjectTutor",
        back_populates="class_details",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<ClassDetails {self.class_id} year={self.class_year}>"
