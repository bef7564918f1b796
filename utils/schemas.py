"""
Pydantic request / response schemas for the to-do API.
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, Field


def _not_blank(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


# ═══════════════════════════════════════════════════════════════════════════════
# Auth
# ═══════════════════════════════════════════════════════════════════════════════


class RegisterRequest(BaseModel):
    name: NonBlankStr = Field(..., max_length=128)
    email: NonBlankStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    email: NonBlankStr
    password: str = Field(..., min_length=1)


class UserSummary(BaseModel):
    id: str
    name: str
    email: str


class LoginResponse(BaseModel):
    token: str
    user: UserSummary


class RegisterResponse(LoginResponse):
    message: str


# ═══════════════════════════════════════════════════════════════════════════════
# Tasks
# ═══════════════════════════════════════════════════════════════════════════════


class TaskCreate(BaseModel):
    text: NonBlankStr = Field(..., max_length=500)


class TaskUpdate(BaseModel):
    """Partial update; omitted fields are left untouched."""

    text: Optional[NonBlankStr] = Field(None, max_length=500)
    completed: Optional[bool] = None


class TaskToggle(BaseModel):
    completed: bool


class TaskOut(BaseModel):
    id: str
    text: str
    completed: bool
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
