from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserLoginBase(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    sign_up_on: Optional[date] = None
    email_id: Optional[EmailStr] = None


class UserLoginCreate(UserLoginBase):
    user_id: str = Field(..., min_length=1)
    # plain credential; hash it before it reaches this layer
    user_password: Optional[str] = None


class UserLoginUpdate(UserLoginBase):
    user_password: Optional[str] = None


class UserLoginResponse(UserLoginBase):
    model_config = ConfigDict(from_attributes=True)

    user_id: str
