"""
HTTP wrapper around the to-do backend.

Attaches the session's bearer token to every call and turns non-2xx
responses into ``ApiError``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from frontend.session import SessionStore

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A non-2xx response from the backend."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")

    @property
    def is_auth_failure(self) -> bool:
        return self.status_code in (401, 403)


class TodoApi:
    def __init__(
        self,
        base_url: str,
        session: SessionStore,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        self.session = session
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "TodoApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        headers = {"Accept": "application/json"}
        if self.session.token:
            headers["Authorization"] = f"Bearer {self.session.token}"

        resp = await self._client.request(method, path, json=json, headers=headers)
        if resp.is_error:
            try:
                body = resp.json()
            except ValueError:
                body = None
            if isinstance(body, dict) and body.get("error"):
                message = str(body["error"])
            else:
                message = resp.text or resp.reason_phrase
            raise ApiError(resp.status_code, message)

        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    # ── Auth ────────────────────────────────────────────────────────────

    async def register(self, name: str, email: str, password: str) -> Dict[str, Any]:
        return await self._request(
            "POST", "/register", {"name": name, "email": email, "password": password}
        )

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        return await self._request("POST", "/login", {"email": email, "password": password})

    # ── Tasks ───────────────────────────────────────────────────────────

    async def fetch_todos(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/todos")

    async def add_todo(self, text: str) -> Dict[str, Any]:
        return await self._request("POST", "/todos", {"text": text})

    async def update_todo(self, task_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"/todos/{task_id}", fields)

    async def toggle_todo(self, task_id: str, completed: bool) -> Dict[str, Any]:
        return await self._request("PATCH", f"/todos/{task_id}/toggle", {"completed": completed})

    async def delete_todo(self, task_id: str) -> None:
        await self._request("DELETE", f"/todos/{task_id}")
