from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class TeacherBase(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    email_id: Optional[EmailStr] = None
    contact: Optional[str] = None
    registration_date: Optional[date] = None
    registration_id: Optional[str] = None


class TeacherCreate(TeacherBase):
    teacher_id: str = Field(..., min_length=1)


class TeacherUpdate(TeacherBase):
    pass


class TeacherResponse(TeacherBase):
    model_config = ConfigDict(from_attributes=True)

    teacher_id: str
