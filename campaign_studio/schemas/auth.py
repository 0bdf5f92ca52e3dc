from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

from campaign_studio.core.constants import PASSWORD_MIN_LENGTH


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)
    name: str = Field(min_length=1, max_length=100)
    company: Optional[str] = Field(None, max_length=200)


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    company: Optional[str] = Field(None, max_length=200)


class PasswordChange(BaseModel):
    current_password: str
    new_password: str = Field(min_length=PASSWORD_MIN_LENGTH)


class UserResponse(BaseModel):
    id: int
    email: EmailStr
    name: str
    company: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
