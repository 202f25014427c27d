from sqlalchemy import Column, Date, String
from sqlalchemy.orm import relationship

from app.db.database import Base


class Teacher(Base):
    __tablename__ = "teachers"

    teacher_id = Column(String, primary_key=True)
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    date_of_birth = Column(Date, nullable=True)
    email_id = Column(String, unique=True, nullable=True)
    contact = Column(String, nullable=True)
    registration_date = Column(Date, nullable=True)
    registration_id = Column(String, unique=True, nullable=True)  # government / school number

    # Every edge into teachers is ON DELETE RESTRICT. passive_deletes="all"
    # stops the ORM from nulling the children's foreign keys, so the engine
    # rejects the delete while any of these rows exist.
    classes = relationship(
        "ClassDetails", back_populates="teacher", passive_deletes="all"
    )
    headed_subjects = relationship(
        "Subject", back_populates="head", passive_deletes="all"
    )
    tutor_assignments = relationship(
        "SubjectTutor", back_populates="teacher", passive_deletes="all"
    )

    def __repr__(self):
        return f"<Teacher {self.teacher_id}>"
