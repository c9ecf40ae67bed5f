# src/dependencies.py
import logging
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.api.auth import get_current_user
from src.core.exceptions import Forbidden, InternalError, NotFound
from src.db import crud, models
from src.db.database import get_db

logger = logging.getLogger(__name__)

OWNER_FIELDS = ("user", "owner", "owner_id")

# Largest value a 64-bit signed INTEGER primary key can hold.
MAX_TODO_ID = 2**63 - 1


def authorize_todo(
    request: Request,
    todo_id: Optional[int] = None,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Optional[models.Todo]:
    """
    Loads the todo a request targets and checks that the caller owns it.

    When no identifier is supplied nothing is loaded and None is returned, leaving
    validation to the handler. A missing todo is a 404; a todo owned by someone
    else is a 403, so existence is not hidden from non-owners. The loaded todo is
    also stored on `request.state.todo`.
    """
    if todo_id is None:
        return None
    if not 1 <= todo_id <= MAX_TODO_ID:
        raise NotFound("Todo not found.")

    try:
        todo = crud.get_todo(db, todo_id)
    except SQLAlchemyError:
        logger.exception(f"Could not load todo {todo_id}.")
        raise InternalError("Error authorizing todo access.")

    if todo is None:
        raise NotFound("Todo not found.")
    if todo.owner_id != current_user.id:
        logger.warning(f"User {current_user.id} denied access to todo {todo_id}.")
        raise Forbidden("Access denied. You do not have permission to access this todo.")

    request.state.todo = todo
    return todo


def set_todo_owner(payload: Dict[str, Any], current_user: models.User) -> Dict[str, Any]:
    """Returns a copy of a todo write payload owned by the authenticated user."""
    owned = {key: value for key, value in payload.items() if key not in OWNER_FIELDS}
    owned["owner_id"] = current_user.id
    return owned
