"""
Task REST routes. Every endpoint requires a Bearer session token and only
sees the caller's own tasks.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user_id
from database.helpers import create_task, delete_task, get_task, list_tasks, update_task
from utils.schemas import TaskCreate, TaskResponse, TaskUpdate

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=List[TaskResponse])
async def read_tasks(
    session: AsyncSession = Depends(db_session),
    user_id: str = Depends(get_current_user_id),
) -> List[TaskResponse]:
    tasks = await list_tasks(session, user_id)
    return [TaskResponse.model_validate(t) for t in tasks]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def add_task(
    body: TaskCreate,
    session: AsyncSession = Depends(db_session),
    user_id: str = Depends(get_current_user_id),
) -> TaskResponse:
    task = await create_task(session, user_id, body.model_dump())
    return TaskResponse.model_validate(task)


@router.get("/{task_id}", response_model=TaskResponse)
async def read_task(
    task_id: str,
    session: AsyncSession = Depends(db_session),
    user_id: str = Depends(get_current_user_id),
) -> TaskResponse:
    task = await get_task(session, user_id, task_id)
    return TaskResponse.model_validate(task)


@router.patch("/{task_id}", response_model=TaskResponse)
async def edit_task(
    task_id: str,
    body: TaskUpdate,
    session: AsyncSession = Depends(db_session),
    user_id: str = Depends(get_current_user_id),
) -> TaskResponse:
    """Partial update — only fields sent by the client change."""
    task = await update_task(session, user_id, task_id, body.model_dump(exclude_unset=True))
    return TaskResponse.model_validate(task)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_task(
    task_id: str,
    session: AsyncSession = Depends(db_session),
    user_id: str = Depends(get_current_user_id),
) -> Response:
    await delete_task(session, user_id, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
