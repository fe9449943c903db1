"""Authentication request and response schemas."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.core.security import MIN_PASSWORD_LENGTH

Role = Literal["admin", "editor"]


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)


class ChangePasswordRequest(BaseModel):
    current_password: str = Field(..., alias="currentPassword")
    new_password: str = Field(..., alias="newPassword", min_length=MIN_PASSWORD_LENGTH)

    model_config = ConfigDict(populate_by_name=True)


class User(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: Role


class UserEnvelope(BaseModel):
    user: User
