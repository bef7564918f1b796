"""
FastAPI dependencies for authentication.

Provides ``db_session`` and ``get_current_user`` dependencies that
are used across all protected routes.
"""

from __future__ import annotations

from typing import AsyncGenerator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import TokenPayload, decode_token
from database.session import get_db_session
from utils.errors import AuthorizationError

_bearer_scheme = HTTPBearer(auto_error=False)


async def db_session(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a DB session for route handlers."""
    yield session


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
) -> TokenPayload:
    """
    Extract and verify the Bearer token, returning the decoded session
    payload (user ``id`` and ``name``).
    """
    if credentials is None or not credentials.credentials:
        raise AuthorizationError("Token não fornecido.")
    return decode_token(credentials.credentials)
