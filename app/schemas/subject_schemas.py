from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SubjectBase(BaseModel):
    subject_name: Optional[str] = None
    class_year: Optional[str] = None
    subject_head: Optional[str] = None


class SubjectCreate(SubjectBase):
    subject_id: str = Field(..., min_length=1)


class SubjectUpdate(SubjectBase):
    pass


class SubjectResponse(SubjectBase):
    model_config = ConfigDict(from_attributes=True)

    subject_id: str
