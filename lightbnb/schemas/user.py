"""
Pydantic schemas for user records, registration and login.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional


class UserCreate(BaseModel):
    """Row values for inserting a user. The password is stored as given."""

    name: str
    email: str
    password: str


class User(BaseModel):
    """A user row as returned by the store."""

    id: int
    name: str
    email: str
    password: str

    model_config = {"from_attributes": True}


class UserRegister(BaseModel):
    """Schema for the registration endpoint."""

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="Login email")
    password: str = Field(..., min_length=8, max_length=72, description="Plain text password")

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        """Normalize email to lowercase."""
        return v.lower().strip()

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class UserResponse(BaseModel):
    """User as exposed over HTTP, without the credential."""

    id: int
    name: str
    email: str

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """Bearer token issued on login or registration."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: Optional[UserResponse] = None
