"""
Pydantic schemas for authentication
"""
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional

from app.apps.authentication.models import AdminRole
from app.config import MIN_PASSWORD_LENGTH


class LoginRequest(BaseModel):
    """Login request schema"""
    email: EmailStr
    password: str = Field(..., min_length=1)


class AdminProfile(BaseModel):
    """Public profile of an admin, never carries the password hash"""
    id: int
    name: str
    email: str
    role: AdminRole

    class Config:
        from_attributes = True


class LoginResponse(AdminProfile):
    """Login response schema, the token is also set as a cookie"""
    access_token: str
    expires_in: int


class LogoutResponse(BaseModel):
    ok: bool = True


class SetupRequest(BaseModel):
    """First admin bootstrap request schema"""
    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)
    name: str = Field(..., min_length=1, max_length=255)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt only looks at the first 72 bytes
        if len(value.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return value


class SetupResponse(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
