"""Pydantic models for API request/response.

Wire names are camelCase to match the browser client; Python attributes
stay snake_case through aliases.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    """Every signup/user error body carries a human-readable message."""
    message: str


class UserLookupRequest(BaseModel):
    """Request model for POST /api/user."""
    email: EmailStr


class UserRecordResponse(CamelModel):
    """Public projection of a user. Never includes the password hash."""
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    avatar: str = ""
    created_at: str = Field(..., alias="createdAt", description="ISO-8601 UTC timestamp")


class SignUpRequest(CamelModel):
    """Request model for POST /api/signup."""
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: EmailStr
    password: str
    confirm_password: str = Field(..., alias="confirmPassword")


class SignInRequest(BaseModel):
    """Request model for POST /api/auth/signin."""
    email: EmailStr
    password: str


class SessionUserResponse(BaseModel):
    """Partial identity exposed by the session endpoint."""
    name: Optional[str] = None
    email: Optional[str] = None
    image: Optional[str] = None


class SignInResponse(BaseModel):
    token: str
    user: SessionUserResponse


class SessionResponse(BaseModel):
    user: SessionUserResponse
    expires: datetime


class PostResponse(BaseModel):
    id: int
    title: str
    content: str
    date: str
    views: int
