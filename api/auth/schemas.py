"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    # `username` carries the user's email address.
    username: str | None = Field(default=None, max_length=320)
    password: str | None = Field(default=None, max_length=128)


class TokenResponse(BaseModel):
    token: str
