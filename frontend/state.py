"""
In-memory state for the task list view.

All reads return copies so callers cannot mutate the list behind the
holder's back.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class TaskState:
    def __init__(self):
        self._tasks: List[Dict[str, Any]] = []
        self.input_text: str = ""
        self.loading_list: bool = False
        self.adding: bool = False

    @property
    def tasks(self) -> List[Dict[str, Any]]:
        return [dict(t) for t in self._tasks]

    def find(self, task_id: str) -> Optional[Dict[str, Any]]:
        for task in self._tasks:
            if task["id"] == task_id:
                return dict(task)
        return None

    def replace_all(self, tasks: List[Dict[str, Any]]) -> None:
        self._tasks = [dict(t) for t in tasks]

    def append(self, task: Dict[str, Any]) -> None:
        self._tasks.append(dict(task))

    def merge(self, task_id: str, fields: Dict[str, Any]) -> None:
        """Overwrite only ``fields`` on the matching task."""
        self._tasks = [
            {**t, **fields} if t["id"] == task_id else t for t in self._tasks
        ]

    def replace(self, task_id: str, task: Dict[str, Any]) -> None:
        self._tasks = [dict(task) if t["id"] == task_id else t for t in self._tasks]

    def remove(self, task_id: str) -> None:
        self._tasks = [t for t in self._tasks if t["id"] != task_id]

    def set_input(self, text: str) -> None:
        self.input_text = text

    def clear_input(self) -> None:
        self.input_text = ""
