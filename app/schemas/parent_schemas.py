from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ParentBase(BaseModel):
    father_first_name: Optional[str] = None
    father_last_name: Optional[str] = None
    father_email_id: Optional[EmailStr] = None
    father_mobile: Optional[str] = None
    father_occupation: Optional[str] = None

    mother_first_name: Optional[str] = None
    mother_last_name: Optional[str] = None
    mother_email_id: Optional[EmailStr] = None
    mother_mobile: Optional[str] = None
    mother_occupation: Optional[str] = None


class ParentCreate(ParentBase):
    parent_id: str = Field(..., min_length=1)


class ParentUpdate(ParentBase):
    pass


class ParentResponse(ParentBase):
    model_config = ConfigDict(from_attributes=True)

    parent_id: str
