from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from app.db.database import Base


class ParentDetails(Base):
    __tablename__ = "parent_details"

    parent_id = Column(String, primary_key=True)

    father_first_name = Column(String, nullable=True)
    father_last_name = Column(String, nullable=True)
    father_email_id = Column(String, unique=True, nullable=True)
    father_mobile = Column(String, nullable=True)
    father_occupation = Column(String, nullable=True)

    mother_first_name = Column(String, nullable=True)
    mother_last_name = Column(String, nullable=True)
    mother_email_id = Column(String, unique=True, nullable=True)
    mother_mobile = Column(String, nullable=True)
    mother_occupation = Column(String, nullable=True)

    # ON DELETE CASCADE: removing a parent removes their children's records
    students = relationship(
        "StudentDetails",
        back_populates="parent",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<ParentDetails {self.parent_id}>"
