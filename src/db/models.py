# src/db/models.py
"""
Defines the SQLAlchemy ORM models for the database.

This module contains the class definitions that map to database tables.
Each class represents a table, and its attributes represent the columns.
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TodoStatus(str, enum.Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False)


class User(Base, TimestampMixin):
    """
    Represents a user in the 'users' table.

    Attributes:
        id (int): The primary key for the user, auto-incrementing.
        email (str): The user's unique email address, stored trimmed and lowercased.
        hashed_password (str): The user's salted password hash. Never serialized.
        todos (relationship): A one-to-many relationship to the todos the user owns.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)

    todos = relationship("Todo", back_populates="owner", cascade="all, delete-orphan")


class Todo(Base, TimestampMixin):
    """
    Represents a single task owned by exactly one user.

    Attributes:
        id (int): The primary key for the todo.
        title (str): Non-empty, trimmed title.
        status (TodoStatus): Either Pending or Completed.
        owner_id (int): Foreign key to the user who created the todo. Set once, from
                        the authenticated user, and never changed afterwards.
        owner (relationship): The back-reference to the User object.
    """
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    status = Column(
        Enum(TodoStatus, values_callable=lambda statuses: [s.value for s in statuses], name="todo_status"),
        nullable=False,
        default=TodoStatus.PENDING,
    )
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    owner = relationship("User", back_populates="todos")
