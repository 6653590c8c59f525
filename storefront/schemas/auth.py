"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials for login. Emptiness is checked by the login service (400)."""

    email: str | None = Field(default=None, description="Account email")
    password: str | None = Field(default=None, description="Account password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    token: str = Field(..., description="JWT bearer token, valid for one hour")
