# src/db/crud.py
"""
This module contains reusable functions for database CRUD operations.

It provides the credential store (users) and the resource store (todos) on top
of the ORM models. Input is validated here before anything is written, and
constraint violations raised by the database are translated into the error
taxonomy in `src.core.exceptions`, so callers see the same errors whichever
layer noticed the problem.
"""
import logging
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.core import security
from src.core.config import settings
from src.core.exceptions import DuplicateEmail, NoFieldsProvided, ValidationError
from src.db import models

logger = logging.getLogger(__name__)

STATUS_ERROR = 'Status must be either "Pending" or "Completed".'

# Marks an update field the caller did not send.
UNSET = object()


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


# --- Credential Store ---

def get_user_by_email(db: Session, email: str) -> models.User | None:
    """
    Fetches a user by email address.

    The address is normalized the same way as on creation, so case and
    whitespace variants resolve to the same account.
    """
    normalized = normalize_email(email)
    if not normalized:
        return None
    return db.query(models.User).filter(models.User.email == normalized).first()


def get_user_by_id(db: Session, user_id: int) -> models.User | None:
    """Fetches a user by primary key."""
    return db.query(models.User).filter(models.User.id == user_id).first()


def create_user(db: Session, email: Optional[str], password: Optional[str]) -> models.User:
    """
    Creates a new user in the database.

    The email is normalized before the uniqueness check and the password is
    hashed with a fresh salt before the record is persisted.

    Args:
        db: The SQLAlchemy database session.
        email: The email address to register.
        password: The raw password.

    Returns:
        The newly created User model instance.

    Raises:
        ValidationError: If a field is missing or the password is too short.
        DuplicateEmail: If the normalized email is already registered.
    """
    normalized = normalize_email(email)
    if not normalized or not password:
        raise ValidationError("Email and password are required.")
    if len(password) < settings.MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters long."
        )
    if get_user_by_email(db, normalized) is not None:
        raise DuplicateEmail()

    db_user = models.User(email=normalized, hashed_password=security.get_password_hash(password))
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same address.
        db.rollback()
        raise DuplicateEmail()
    db.refresh(db_user)
    logger.info(f"Registered user {db_user.id}.")
    return db_user


def verify_user_password(user: models.User, password: Optional[str]) -> bool:
    """Checks a raw password against the user's stored hash."""
    if not password:
        return False
    return security.verify_password(password, user.hashed_password)


def authenticate_user(db: Session, email: str, password: str) -> models.User | None:
    """
    Returns the user matching the credentials, or None.

    Unknown emails and wrong passwords both yield None so that callers cannot
    tell the two apart.
    """
    user = get_user_by_email(db, email)
    if user is None or not verify_user_password(user, password):
        return None
    return user


# --- Resource Store ---

def _clean_title(title: Optional[str]) -> str:
    return (title or "").strip()


def _parse_status(status: Optional[str]) -> models.TodoStatus:
    try:
        return models.TodoStatus(status)
    except ValueError:
        raise ValidationError(STATUS_ERROR)


def get_todo(db: Session, todo_id: int) -> models.Todo | None:
    return db.query(models.Todo).filter(models.Todo.id == todo_id).first()


def get_todos_for_owner(db: Session, owner_id: int) -> list[models.Todo]:
    """Fetches every todo owned by a user, newest first."""
    return (
        db.query(models.Todo)
        .filter(models.Todo.owner_id == owner_id)
        .order_by(models.Todo.created_at.desc(), models.Todo.id.desc())
        .all()
    )


def create_todo(
    db: Session, owner_id: int, title: Optional[str], status: Optional[str] = None
) -> models.Todo:
    """
    Creates a todo for the given owner.

    Args:
        db: The SQLAlchemy database session.
        owner_id: The id of the authenticated user. Never taken from client input.
        title: The title; surrounding whitespace is stripped.
        status: Pending or Completed. Defaults to Pending when omitted.

    Returns:
        The newly created Todo model instance.

    Raises:
        ValidationError: If the title is empty or the status is not recognized.
    """
    cleaned_title = _clean_title(title)
    if not cleaned_title:
        raise ValidationError("Title is required.")
    todo_status = _parse_status(status) if status else models.TodoStatus.PENDING

    db_todo = models.Todo(title=cleaned_title, status=todo_status, owner_id=owner_id)
    db.add(db_todo)
    db.commit()
    db.refresh(db_todo)
    logger.info(f"User {owner_id} created todo {db_todo.id}.")
    return db_todo


def update_todo(db: Session, todo: models.Todo, title: Any = UNSET, status: Any = UNSET) -> models.Todo:
    """
    Applies a partial update to a todo that has already passed the ownership check.

    Only the fields passed are touched. A field passed explicitly as None counts
    as supplied, so `title=None` next to a valid status is rejected rather than
    ignored.

    Raises:
        NoFieldsProvided: If neither title nor status carries a value.
        ValidationError: If the title is empty after trimming or the status is not recognized.
    """
    supplied = [value for value in (title, status) if value is not UNSET]
    if not any(supplied):
        raise NoFieldsProvided()

    # A rejected update must leave the instance untouched.
    cleaned_title = None
    if title is not UNSET:
        cleaned_title = _clean_title(title)
        if not cleaned_title:
            raise ValidationError("Title cannot be empty.")
    new_status = _parse_status(status) if status is not UNSET else None

    if cleaned_title is not None:
        todo.title = cleaned_title
    if new_status is not None:
        todo.status = new_status

    db.commit()
    db.refresh(todo)
    logger.info(f"Updated todo {todo.id}.")
    return todo


def delete_todo(db: Session, todo: models.Todo) -> None:
    """Deletes a todo that has already passed the ownership check."""
    todo_id = todo.id
    db.delete(todo)
    db.commit()
    logger.info(f"Deleted todo {todo_id}.")
