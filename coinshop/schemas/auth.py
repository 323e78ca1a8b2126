"""Auth Schemas - credentials in, token out."""

from pydantic import BaseModel, Field


class AuthRequest(BaseModel):
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=72)


class AuthResponse(BaseModel):
    token: str
