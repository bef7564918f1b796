"""
Client-side session — the token and user summary of whoever is logged in.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from frontend.api import TodoApi

logger = logging.getLogger(__name__)


class SessionStore:
    def __init__(self):
        self._token: Optional[str] = None
        self._user: Optional[Dict[str, Any]] = None
        self._logout_listeners: List[Callable[[], None]] = []

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def user(self) -> Optional[Dict[str, Any]]:
        return dict(self._user) if self._user else None

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def login(self, token: str, user: Dict[str, Any]) -> None:
        self._token = token
        self._user = dict(user)

    def logout(self) -> None:
        """Forget the token and notify listeners (e.g. to show the login view)."""
        was_authenticated = self.is_authenticated
        self._token = None
        self._user = None
        if was_authenticated:
            logger.info("Session ended")
        for listener in list(self._logout_listeners):
            listener()

    def on_logout(self, listener: Callable[[], None]) -> None:
        self._logout_listeners.append(listener)


class AuthClient:
    """Register / login against the backend and keep the resulting session."""

    def __init__(self, api: "TodoApi"):
        self._api = api

    @property
    def session(self) -> SessionStore:
        return self._api.session

    async def register(self, name: str, email: str, password: str) -> Dict[str, Any]:
        data = await self._api.register(name, email, password)
        self.session.login(data["token"], data["user"])
        return data["user"]

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        data = await self._api.login(email, password)
        self.session.login(data["token"], data["user"])
        return data["user"]

    def logout(self) -> None:
        self.session.logout()
