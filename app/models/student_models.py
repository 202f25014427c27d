from sqlalchemy import Column, Date, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import relationship

from app.db.database import Base


class StudentDetails(Base):
    __tablename__ = "student_details"

    student_id = Column(String, primary_key=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    date_of_birth = Column(Date, nullable=True)
    class_id = Column(
        String, ForeignKey("class_details.class_id", ondelete="CASCADE"), nullable=True
    )
    roll_no = Column(String, nullable=True)  # unique within the class
    email_id = Column(String, unique=True, nullable=True)
    parent_id = Column(
        String, ForeignKey("parent_details.parent_id", ondelete="CASCADE"), nullable=True
    )
    registration_date = Column(Date, nullable=True)
    registration_id = Column(String, unique=True, nullable=True)  # admission number

    class_details = relationship("ClassDetails", back_populates="students")
    parent = relationship("ParentDetails", back_populates="students")

    exam_results = relationship(
        "ExamResult",
        back_populates="student",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="ExamResult.exam_date.asc()",
    )

    __table_args__ = (
        UniqueConstraint("roll_no", "class_id"),
        Index("idx_student_class", "class_id"),
    )

    def __repr__(self):
        return f"<StudentDetails {self.student_id} class={self.class_id} roll={self.roll_no}>"
