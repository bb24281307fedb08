"""
Database helper functions — task CRUD scoped to the owning user.

"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from auth.errors import TaskNotFoundError
from database.models import Task

logger = logging.getLogger(__name__)



def _to_uuid(value: str | uuid.UUID) -> uuid.UUID:
    return uuid.UUID(value) if isinstance(value, str) else value



async def list_tasks(session: AsyncSession, user_id: str) -> List[Task]:
    """All tasks owned by ``user_id``, newest first."""
    result = await session.execute(
        select(Task)
        .where(Task.user == user_id)
        .order_by(Task.created_at.desc())
    )
    return list(result.scalars().all())


async def create_task(
    session: AsyncSession,
    user_id: str,
    data: Dict[str, Any],
) -> Task:
    task = Task(
        task_id=uuid.uuid4(),
        title=data["title"],
        due_date=data.get("due_date"),
        due_time=data.get("due_time"),
        completed=data.get("completed", False),
        user=user_id,
    )
    session.add(task)
    await session.commit()
    await session.refresh(task)
    logger.info("Created task %s for user %s", task.task_id, user_id)
    return task


async def get_task(session: AsyncSession, user_id: str, task_id: str) -> Task:
    """Return the task, or raise ``TaskNotFoundError`` if it is not the user's."""
    try:
        tid = _to_uuid(task_id)
    except ValueError:
        raise TaskNotFoundError()

    result = await session.execute(
        select(Task).where(Task.task_id == tid, Task.user == user_id)
    )
    task = result.scalar_one_or_none()
    if task is None:
        raise TaskNotFoundError()
    return task


async def update_task(
    session: AsyncSession,
    user_id: str,
    task_id: str,
    changes: Dict[str, Any],
) -> Task:
    """Apply a partial update; keys not in ``changes`` are left untouched."""
    task = await get_task(session, user_id, task_id)
    for field in ("title", "due_date", "due_time", "completed"):
        if field not in changes:
            continue
        # title and completed are NOT NULL; an explicit null leaves them as-is
        if changes[field] is None and field in ("title", "completed"):
            continue
        setattr(task, field, changes[field])
    await session.commit()
    await session.refresh(task)
    return task


async def delete_task(session: AsyncSession, user_id: str, task_id: str) -> None:
    task = await get_task(session, user_id, task_id)
    await session.delete(task)
    await session.commit()
    logger.info("Deleted task %s for user %s", task_id, user_id)
