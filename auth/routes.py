"""
Auth API routes — register, login.

Mounted at ``config.api_prefix`` (root by default).
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session
from auth.service import AuthService
from utils.schemas import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse

router = APIRouter(tags=["auth"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    req: RegisterRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Register a new user and log them in."""
    return await AuthService(session).register(req.name, req.email, req.password)


@router.post("/login", response_model=LoginResponse)
async def login(
    req: LoginRequest,
    session: AsyncSession = Depends(db_session),
) -> Dict[str, Any]:
    """Login with email + password."""
    return await AuthService(session).login(req.email, req.password)
