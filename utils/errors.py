"""
Application error taxonomy.

Every error carries the HTTP status it maps to and a user-facing message.
``api.middleware`` turns them into ``{"error": message}`` JSON bodies.
"""

from __future__ import annotations

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Erro no servidor."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Preencha todos os campos."


class AuthError(AppError):
    """Bad credentials on login."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Credenciais inválidas."


class AuthorizationError(AppError):
    """Missing, malformed or expired session token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token inválido ou expirado."


class NotFoundError(AppError):
    """Resource missing or not owned by the caller."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Recurso não encontrado."


class ConflictError(AppError):
    """Unique key already taken."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "E-mail já cadastrado."


class InternalError(AppError):
    """Unexpected storage, hashing or signing failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Erro no servidor."
