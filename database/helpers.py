"""
Database helper functions — credential lookups and owner-scoped task CRUD.

"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Task, User

logger = logging.getLogger(__name__)

_UPDATABLE_TASK_FIELDS = ("text", "completed")


def _to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    return uuid.UUID(value) if isinstance(value, str) else value


# ── Users ───────────────────────────────────────────────────────────


async def get_user_by_email(session: AsyncSession, email: str) -> Optional[User]:
    result = await session.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def create_user(
    session: AsyncSession,
    name: str,
    email: str,
    password_hash: str,
) -> User:
    """Insert a new ``User`` row and return the persisted instance."""
    user = User(user_id=uuid.uuid4(), name=name, email=email, password_hash=password_hash)
    session.add(user)
    await session.flush()
    await session.commit()
    return user


# ── Tasks ───────────────────────────────────────────────────────────


async def list_tasks(session: AsyncSession, user_id: str | uuid.UUID) -> List[Task]:
    result = await session.execute(
        select(Task)
        .where(Task.user_id == _to_uuid(user_id))
        .order_by(Task.created_at.asc())
    )
    return list(result.scalars().all())


async def get_task(
    session: AsyncSession,
    user_id: str | uuid.UUID,
    task_id: str | uuid.UUID,
) -> Optional[Task]:
    """Fetch a task only if it belongs to ``user_id``."""
    result = await session.execute(
        select(Task).where(
            Task.task_id == _to_uuid(task_id),
            Task.user_id == _to_uuid(user_id),
        )
    )
    return result.scalar_one_or_none()


async def create_task(session: AsyncSession, user_id: str | uuid.UUID, text: str) -> Task:
    task = Task(task_id=uuid.uuid4(), user_id=_to_uuid(user_id), text=text, completed=False)
    session.add(task)
    await session.flush()
    await session.commit()
    return task


async def update_task(
    session: AsyncSession,
    user_id: str | uuid.UUID,
    task_id: str | uuid.UUID,
    fields: Dict[str, Any],
) -> Optional[Task]:
    """
    Apply a partial update to an owned task.

    Only ``text`` and ``completed`` are writable; returns ``None`` when the
    task does not exist for this user.
    """
    task = await get_task(session, user_id, task_id)
    if task is None:
        return None

    for key in _UPDATABLE_TASK_FIELDS:
        if key in fields and fields[key] is not None:
            setattr(task, key, fields[key])

    await session.flush()
    await session.commit()
    await session.refresh(task)
    return task


async def delete_task(
    session: AsyncSession,
    user_id: str | uuid.UUID,
    task_id: str | uuid.UUID,
) -> bool:
    """Delete an owned task. Returns ``False`` if nothing matched."""
    result = await session.execute(
        delete(Task).where(
            Task.task_id == _to_uuid(task_id),
            Task.user_id == _to_uuid(user_id),
        )
    )
    await session.commit()
    deleted = (result.rowcount or 0) > 0
    if not deleted:
        logger.debug("Delete of task %s for user %s matched no rows", task_id, user_id)
    return deleted
