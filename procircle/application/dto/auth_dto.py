from typing import Optional

from pydantic import EmailStr, Field, field_validator

from .base import CamelModel
from .user_dto import UserResponse
from ...core.security import MAX_PASSWORD_BYTES


class UserRegistrationRequest(CamelModel):
    """DTO for user registration request"""
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    # Minimum length is enforced by the configured password policy
    password: str = Field(min_length=1, max_length=MAX_PASSWORD_BYTES)
    bio: Optional[str] = Field(default=None, max_length=500)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class UserLoginRequest(CamelModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=1, max_length=MAX_PASSWORD_BYTES)


class AuthResponse(CamelModel):
    """DTO for register/login response: bearer token plus the user"""
    message: str
    token: str
    token_type: str = "bearer"
    user: UserResponse
