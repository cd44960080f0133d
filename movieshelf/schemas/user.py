# movieshelf/schemas/user.py

from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError
from datetime import datetime
from movieshelf.core.validation import required_string


class User(BaseModel):
    id: int = Field(description="User ID")
    username: str = Field(description="Username")
    email: str = Field(description="Email")
    role: str = Field(default="user", description="Role")
    created_at: Optional[datetime] = Field(default=None, description="Created at")

    class Config:
        from_attributes = True


class UserRegister(BaseModel):
    username: Optional[str] = Field(default=None, validate_default=True)
    email: Optional[str] = Field(default=None, validate_default=True)
    password: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("username", mode="before")
    @classmethod
    def _check_username(cls, value: Any) -> str:
        value = required_string(value, "Username is required", "Username must be a string")
        if not 2 <= len(value.strip()) <= 50:
            raise PydanticCustomError("length", "Username must be between 2 and 50 characters")
        return value.strip()

    @field_validator("email", mode="before")
    @classmethod
    def _check_email(cls, value: Any) -> str:
        value = required_string(value, "Email is required", "Email must be a string")
        if "@" not in value:
            raise PydanticCustomError("email", "Email must be a valid email address")
        return value.strip().lower()

    @field_validator("password", mode="before")
    @classmethod
    def _check_password(cls, value: Any) -> str:
        value = required_string(value, "Password is required", "Password must be a string")
        if len(value) < 6:
            raise PydanticCustomError("length", "Password must be at least 6 characters")
        return value


class UserLogin(BaseModel):
    email: Optional[str] = Field(default=None, validate_default=True)
    password: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("email", mode="before")
    @classmethod
    def _check_email(cls, value: Any) -> str:
        return required_string(value, "Email is required", "Email must be a string").strip().lower()

    @field_validator("password", mode="before")
    @classmethod
    def _check_password(cls, value: Any) -> str:
        return required_string(value, "Password is required", "Password must be a string")


class TokenResponse(BaseModel):
    access_token: str = Field(description="Access token")
    token_type: str = Field(default="bearer", description="Token type")
    user: User = Field(description="User")
