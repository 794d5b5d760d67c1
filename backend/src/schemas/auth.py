"""Pydantic schemas for signup/signin endpoints."""
from pydantic import BaseModel, EmailStr, Field


class AuthRequest(BaseModel):
    """Credentials used for both signup and signin."""

    email: EmailStr
    password: str = Field(min_length=1, max_length=72)


class TokenResponse(BaseModel):
    """Bearer token returned after successful authentication."""

    access_token: str
    token_type: str = "bearer"
