"""
Auth service — registration and login.

Orchestrates the credential store lookups, bcrypt hashing and token
issuance. Every failure leaves as an ``AppError`` subclass so the HTTP
layer only has to render it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from auth.jwt import create_token
from auth.password import hash_password, verify_password
from database.helpers import create_user, get_user_by_email
from database.models import User
from utils.errors import (
    AppError,
    AuthError,
    ConflictError,
    InternalError,
    ValidationError,
)

logger = logging.getLogger(__name__)

MSG_MISSING_FIELDS = "Preencha todos os campos."
MSG_EMAIL_TAKEN = "E-mail já cadastrado."
MSG_USER_NOT_FOUND = "Usuário não encontrado."
MSG_BAD_PASSWORD = "Senha incorreta."
MSG_REGISTER_FAILED = "Erro ao registrar usuário."
MSG_SERVER_ERROR = "Erro no servidor."
MSG_REGISTERED = "Usuário registrado com sucesso"


def _require(*values: str | None) -> None:
    if any(value is None or not str(value).strip() for value in values):
        raise ValidationError(MSG_MISSING_FIELDS)


def _session_response(user: User) -> Dict[str, Any]:
    return {
        "token": create_token(str(user.user_id), user.name),
        "user": user.to_summary(),
    }


class AuthService:
    """Single-shot register / login operations bound to one DB session."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def register(self, name: str, email: str, password: str) -> Dict[str, Any]:
        _require(name, email, password)
        name, email = name.strip(), email.strip()

        try:
            if await get_user_by_email(self._session, email) is not None:
                raise ConflictError(MSG_EMAIL_TAKEN)

            password_hash = await asyncio.to_thread(hash_password, password)
            user = await create_user(self._session, name, email, password_hash)
            response = _session_response(user)
        except AppError:
            raise
        except IntegrityError as exc:
            # Lost a race against a concurrent registration of the same email.
            await self._session.rollback()
            raise ConflictError(MSG_EMAIL_TAKEN) from exc
        except Exception as exc:
            logger.exception("Registration failed for %s", email)
            raise InternalError(MSG_REGISTER_FAILED) from exc

        logger.info("Registered user %s (%s)", user.name, user.user_id)
        response["message"] = MSG_REGISTERED
        return response

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        _require(email, password)
        email = email.strip()

        try:
            user = await get_user_by_email(self._session, email)
            if user is None:
                raise AuthError(MSG_USER_NOT_FOUND)

            valid = await asyncio.to_thread(verify_password, password, user.password_hash)
            if not valid:
                raise AuthError(MSG_BAD_PASSWORD)

            response = _session_response(user)
        except AppError:
            raise
        except Exception as exc:
            logger.exception("Login failed for %s", email)
            raise InternalError(MSG_SERVER_ERROR) from exc

        logger.info("Login: %s (%s)", user.name, user.user_id)
        return response
