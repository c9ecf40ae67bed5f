"""Pydantic schemas for todo items.

The request schemas deliberately have no owner field: the owner is always
taken from the authenticated user, and any `user` or `owner_id` key a client
sends is dropped during parsing.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.db.models import TodoStatus


class TodoCreate(BaseModel):
    """Request body for creating a todo. Title is validated by the store."""
    title: Optional[str] = None
    status: Optional[str] = None


class TodoUpdate(BaseModel):
    """Request body for a partial update. Omitted fields stay unchanged."""
    title: Optional[str] = None
    status: Optional[str] = None


class Todo(BaseModel):
    """Schema for representing a todo in API responses."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    status: TodoStatus
    user: int = Field(validation_alias="owner_id")
    created_at: datetime
    updated_at: datetime
