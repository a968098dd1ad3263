"""
Pydantic schemas for authentication.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field, field_validator

from eventdesk.auth.models import UserRole
from eventdesk.shared.schemas import CamelModel


class TokenPayload(BaseModel):
    """JWT token payload schema."""

    sub: UUID = Field(..., description="User ID")
    email: str = Field(..., description="User email")
    name: str = Field(..., description="User display name")
    role: UserRole = Field(..., description="User role")
    type: Literal["access"] = Field(..., description="Token type")
    iat: datetime = Field(..., description="Issued at time")
    exp: datetime = Field(..., description="Expiration time")


class RegisterRequest(CamelModel):
    """Account registration payload."""

    email: EmailStr = Field(..., description="Login email, unique")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    password: str = Field(..., min_length=6, max_length=128, description="Plaintext password")
    role: UserRole | None = Field(
        default=None,
        description="Requested role; honoured only when role selection is enabled",
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class LoginRequest(CamelModel):
    """Email/password login payload."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserProfile(CamelModel):
    """User profile response schema."""

    id: UUID = Field(..., description="User ID")
    email: str = Field(..., description="User email")
    name: str = Field(..., description="User display name")
    role: UserRole = Field(..., description="User role")
    created_at: datetime = Field(..., description="Account creation time")


class TokenResponse(BaseModel):
    """Login response; token fields follow the OAuth2 bearer naming."""

    access_token: str = Field(..., description="Signed session token")
    token_type: str = Field(default="Bearer", description="Token type")
    expires_in: int = Field(..., description="Token lifetime in seconds")
    user: UserProfile = Field(..., description="Authenticated user")
