from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class StudentBase(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    class_id: Optional[str] = None
    roll_no: Optional[str] = None
    email_id: Optional[EmailStr] = None
    parent_id: Optional[str] = None
    registration_date: Optional[date] = None
    registration_id: Optional[str] = None

    @field_validator("roll_no")
    @classmethod
    def validate_roll_no(cls, value):
        if value is None:
            return value
        value = value.strip()
        if not value:
            raise ValueError("roll_no cannot be blank")
        return value


class StudentCreate(StudentBase):
    student_id: str = Field(..., min_length=1)


class StudentUpdate(StudentBase):
    pass


class StudentResponse(StudentBase):
    model_config = ConfigDict(from_attributes=True)

    student_id: str
