"""
TaskClient — keeps a ``TaskState`` in sync with the backend.

Every mutation waits for the server before touching local state, so a
failed request never leaves a phantom change behind. Overlapping calls are
not coordinated: whichever response resolves last wins.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Dict, List, Optional

import httpx

from frontend.api import ApiError, TodoApi
from frontend.session import SessionStore
from frontend.state import TaskState

logger = logging.getLogger(__name__)

# Keeps the "adding" affordance visible long enough not to flicker.
MIN_ADD_DURATION = 0.150

_REQUEST_ERRORS = (ApiError, httpx.HTTPError)


class TaskClient:
    def __init__(
        self,
        api: TodoApi,
        state: Optional[TaskState] = None,
        session: Optional[SessionStore] = None,
        min_add_duration: float = MIN_ADD_DURATION,
    ):
        self.api = api
        self.state = state or TaskState()
        self.session = session or api.session
        self.min_add_duration = min_add_duration

    async def load(self) -> List[Dict[str, Any]]:
        """
        Fetch the full task list. A 401/403 ends the session instead of
        being reported as an error.
        """
        self.state.loading_list = True
        try:
            tasks = await self.api.fetch_todos()
            self.state.replace_all(tasks)
        except ApiError as exc:
            if exc.is_auth_failure:
                logger.info("Session rejected while loading tasks (%s); logging out", exc.status_code)
                self.session.logout()
            else:
                logger.error("Failed to load tasks: %s", exc)
        except httpx.HTTPError as exc:
            logger.error("Failed to load tasks: %s", exc)
        finally:
            self.state.loading_list = False
        return self.state.tasks

    async def add(self, text: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Create a task from ``text`` (or the current input). Blank text is ignored."""
        if text is None:
            text = self.state.input_text
        if not text.strip():
            return None

        start = time.monotonic()
        self.state.adding = True
        try:
            task = await self.api.add_todo(text)
            elapsed = time.monotonic() - start
            if elapsed < self.min_add_duration:
                await asyncio.sleep(self.min_add_duration - elapsed)

            self.state.append(task)
            self.state.clear_input()
            return task
        except _REQUEST_ERRORS as exc:
            logger.error("Failed to add task: %s", exc)
            return None
        finally:
            self.state.adding = False

    async def toggle_complete(self, task_id: str) -> Optional[Dict[str, Any]]:
        task = self.state.find(task_id)
        if task is None:
            logger.warning("Toggle requested for unknown task %s", task_id)
            return None

        try:
            result = await self.api.toggle_todo(task_id, not task["completed"])
        except _REQUEST_ERRORS as exc:
            logger.error("Failed to toggle task %s: %s", task_id, exc)
            return None

        # Only the flag comes from the server; other local fields are kept.
        self.state.merge(task_id, {"completed": result["completed"]})
        return self.state.find(task_id)

    async def remove(self, task_id: str) -> bool:
        try:
            await self.api.delete_todo(task_id)
        except _REQUEST_ERRORS as exc:
            logger.error("Failed to delete task %s: %s", task_id, exc)
            return False

        self.state.remove(task_id)
        return True

    async def update(self, task_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            updated = await self.api.update_todo(task_id, fields)
        except _REQUEST_ERRORS as exc:
            logger.error("Failed to update task %s: %s", task_id, exc)
            return None

        self.state.replace(task_id, updated)
        return updated
