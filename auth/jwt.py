"""
JWT session token creation and verification.

Tokens are HS256-signed JWTs carrying the user's ``id``, ``name`` and an
expiry. Secret and lifetime come from ``config`` (env: ``JWT_SECRET``,
``JWT_EXPIRY_SECONDS``).
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError as PydanticValidationError

from config.settings import config
from utils.errors import AuthorizationError


class TokenPayload(BaseModel):
    id: str
    name: str
    exp: int


def create_token(user_id: str, name: str, expires_in: int | None = None) -> str:
    """Create a signed token containing ``id``, ``name`` and expiry."""
    now = datetime.now(timezone.utc)
    lifetime = config.jwt_expiry_seconds if expires_in is None else expires_in
    payload = {
        "id": user_id,
        "name": name,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=lifetime)).timestamp()),
    }
    return jwt.encode(payload, config.jwt_secret, algorithm=config.jwt_algorithm)


def decode_token(token: str) -> TokenPayload:
    """
    Verify a token and return its payload.

    Raises ``AuthorizationError`` on malformed, forged or expired tokens.
    """
    try:
        claims = jwt.decode(token, config.jwt_secret, algorithms=[config.jwt_algorithm])
        return TokenPayload.model_validate(claims)
    except (JWTError, PydanticValidationError) as exc:
        raise AuthorizationError() from exc
