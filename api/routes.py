"""
REST API routes for the authenticated user's tasks.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user
from auth.jwt import TokenPayload
from database.helpers import (
    create_task,
    delete_task,
    list_tasks,
    update_task,
)
from utils.errors import NotFoundError
from utils.schemas import TaskCreate, TaskOut, TaskToggle, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter(tags=["todos"])

MSG_TASK_NOT_FOUND = "Tarefa não encontrada."


@router.get("/todos", response_model=List[TaskOut])
async def get_todos(
    session: AsyncSession = Depends(db_session),
    user: TokenPayload = Depends(get_current_user),
) -> List[Dict[str, Any]]:
    """List the caller's tasks, oldest first."""
    tasks = await list_tasks(session, user.id)
    return [t.to_dict() for t in tasks]


@router.post("/todos", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
async def add_todo(
    payload: TaskCreate,
    session: AsyncSession = Depends(db_session),
    user: TokenPayload = Depends(get_current_user),
) -> Dict[str, Any]:
    task = await create_task(session, user.id, payload.text)
    logger.info("User %s created task %s", user.id, task.task_id)
    return task.to_dict()


@router.put("/todos/{task_id}", response_model=TaskOut)
async def edit_todo(
    task_id: uuid.UUID,
    payload: TaskUpdate,
    session: AsyncSession = Depends(db_session),
    user: TokenPayload = Depends(get_current_user),
) -> Dict[str, Any]:
    """Partially update text and/or completion of an owned task."""
    task = await update_task(session, user.id, task_id, payload.model_dump(exclude_none=True))
    if task is None:
        raise NotFoundError(MSG_TASK_NOT_FOUND)
    return task.to_dict()


@router.patch("/todos/{task_id}/toggle", response_model=TaskOut)
async def toggle_todo(
    task_id: uuid.UUID,
    payload: TaskToggle,
    session: AsyncSession = Depends(db_session),
    user: TokenPayload = Depends(get_current_user),
) -> Dict[str, Any]:
    task = await update_task(session, user.id, task_id, {"completed": payload.completed})
    if task is None:
        raise NotFoundError(MSG_TASK_NOT_FOUND)
    return task.to_dict()


@router.delete("/todos/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_todo(
    task_id: uuid.UUID,
    session: AsyncSession = Depends(db_session),
    user: TokenPayload = Depends(get_current_user),
) -> Response:
    """Delete an owned task. Deleting an unknown id is a no-op."""
    await delete_task(session, user.id, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/health")
async def health_check() -> Dict[str, str]:
    return {"status": "ok"}
