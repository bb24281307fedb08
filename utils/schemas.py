"""
Pydantic schemas for the task API.

Field names follow the stored record shape on the wire (``dueDate``,
``dueTime``) while Python code uses snake_case.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TaskCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., min_length=1)
    due_date: Optional[str] = Field(None, alias="dueDate")
    due_time: Optional[str] = Field(None, alias="dueTime")
    completed: bool = False


class TaskUpdate(BaseModel):
    """Partial update; only fields present in the request body are applied."""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(None, min_length=1)
    due_date: Optional[str] = Field(None, alias="dueDate")
    due_time: Optional[str] = Field(None, alias="dueTime")
    completed: Optional[bool] = None


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: uuid.UUID = Field(..., validation_alias="task_id")
    title: str
    due_date: Optional[str] = Field(None, serialization_alias="dueDate")
    due_time: Optional[str] = Field(None, serialization_alias="dueTime")
    user: Optional[str] = None
    completed: bool = False
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(None, serialization_alias="updatedAt")
