"""
Password hashing and verification.

Uses bcrypt for password hashing with automatic
salting and a configurable work factor.
"""

from __future__ import annotations

import bcrypt

from config.settings import config

# bcrypt only reads the first 72 bytes; newer releases raise on longer input.
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode()[:_BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int | None = None) -> str:
    """Hash a password with bcrypt (auto-salted, work factor from settings)."""
    salt = bcrypt.gensalt(rounds=rounds or config.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode())
    except (ValueError, TypeError):
        return False
