from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ClassBase(BaseModel):
    class_teacher: Optional[str] = None
    class_year: Optional[str] = None


class ClassCreate(ClassBase):
    class_id: str = Field(..., min_length=1)


class ClassUpdate(ClassBase):
    pass


class ClassResponse(ClassBase):
    model_config = ConfigDict(from_attributes=True)

    class_id: str
