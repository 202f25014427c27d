from sqlalchemy import Column, ForeignKey, String
from sqlalchemy.orm import relationship

from app.db.database import Base


class Subject(Base):
    __tablename__ = "subject"

    subject_id = Column(String, primary_key=True)  # subject code
    subject_name = Column(String, nullable=True)
    class_year = Column(String, nullable=True)
    subject_head = Column(
        String, ForeignKey("teachers.teacher_id", ondelete="RESTRICT"), nullable=True
    )

    head = relationship("Teacher", back_populates="headed_subjects")

    subject_tutors = relationship(
        "SubjectTutor",
        back_populates="subject",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    exam_results = relationship(
        "ExamResult",
        back_populates="subject",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Subject {self.subject_id} {self.subject_name}>"
