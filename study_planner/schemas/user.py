from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    email: str = Field(pattern=r"^[^@\s]+@[^@\s]+$")
    name: str = Field(min_length=1)
    id: str | None = None


class UserRead(BaseModel):
    id: str
    email: str
    name: str

    class Config:
        from_attributes = True


class AuthStatus(BaseModel):
    is_authenticated: bool
    user: UserRead | None = None
