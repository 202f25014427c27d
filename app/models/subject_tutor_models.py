from sqlalchemy import Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from app.db.database import Base


class SubjectTutor(Base):
    """
    Maps a subject to the teacher who teaches it in a given class.
    A subject can have several teachers across classes; duplicate
    (subject, teacher, class) triples are accepted.
    """

    __tablename__ = "subject_tutors"

    row_id = Column(Integer, primary_key=True, autoincrement=True)
    subject_id = Column(
        String, ForeignKey("subject.subject_id", ondelete="CASCADE"), nullable=True
    )
    teacher_id = Column(
        String, ForeignKey("teachers.teacher_id", ondelete="RESTRICT"), nullable=True
    )
    class_id = Column(
        String, ForeignKey("class_details.class_id", ondelete="CASCADE"), nullable=True
    )

    subject = relationship("Subject", back_populates="subject_tutors")
    teacher = relationship("Teacher", back_populates="tutor_assignments")
    class_details = relationship("ClassDetails", back_populates="subject_tutors")

    __table_args__ = (Index("idx_subject_class", "class_id"),)

    def __repr__(self):
        return f"<SubjectTutor {self.row_id} {self.subject_id}/{self.teacher_id}/{self.class_id}>"
