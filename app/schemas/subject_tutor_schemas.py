from typing import Optional

from pydantic import BaseModel, ConfigDict


class SubjectTutorBase(BaseModel):
    subject_id: Optional[str] = None
    teacher_id: Optional[str] = None
    class_id: Optional[str] = None


class SubjectTutorCreate(SubjectTutorBase):
    pass


class SubjectTutorUpdate(SubjectTutorBase):
    pass


class SubjectTutorResponse(SubjectTutorBase):
    model_config = ConfigDict(from_attributes=True)

    row_id: int
