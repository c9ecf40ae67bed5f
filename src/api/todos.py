# src/api/todos.py

"""
API router for the authenticated user's todo list.

Every route requires a bearer token. Routes that target a single todo also go
through the ownership check in `src.dependencies.authorize_todo`, which hands
the already loaded todo to the handler.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.api.auth import get_current_user
from src.core.exceptions import InternalError
from src.db import crud, models
from src.db.database import get_db
from src.dependencies import authorize_todo, set_todo_owner
from src.schemas import todo as todo_schemas
from src.schemas.response import Envelope

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["todos"],
    responses={404: {"description": "Not found"}},
)


@router.post(
    "",
    response_model=Envelope[todo_schemas.Todo],
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
)
def create_todo(
    todo_in: todo_schemas.TodoCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> dict:
    """
    Create a todo owned by the currently authenticated user.

    The owner is always the caller; any owner value in the request body is
    discarded. Status defaults to Pending.
    """
    fields = set_todo_owner(todo_in.model_dump(), current_user)
    try:
        db_todo = crud.create_todo(
            db, owner_id=fields["owner_id"], title=fields["title"], status=fields["status"]
        )
    except SQLAlchemyError:
        logger.exception("Todo creation failed.")
        raise InternalError("Error creating todo. Please try again.")
    return {"message": "Todo created successfully.", "data": db_todo}


@router.get(
    "",
    response_model=Envelope[List[todo_schemas.Todo]],
    response_model_exclude_none=True,
)
def list_todos(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(get_current_user),
) -> dict:
    """Return the caller's todos, newest first."""
    try:
        todos = crud.get_todos_for_owner(db, owner_id=current_user.id)
    except SQLAlchemyError:
        logger.exception("Todo listing failed.")
        raise InternalError("Error fetching todos. Please try again.")
    return {"count": len(todos), "data": todos}


@router.put(
    "/{todo_id}",
    response_model=Envelope[todo_schemas.Todo],
    response_model_exclude_none=True,
)
def update_todo(
    todo_in: todo_schemas.TodoUpdate,
    todo: models.Todo = Depends(authorize_todo),
    db: Session = Depends(get_db),
) -> dict:
    """Update the title and/or status of a todo the caller owns."""
    try:
        db_todo = crud.update_todo(db, todo, **todo_in.model_dump(exclude_unset=True))
    except SQLAlchemyError:
        logger.exception(f"Update of todo {todo.id} failed.")
        raise InternalError("Error updating todo. Please try again.")
    return {"message": "Todo updated successfully.", "data": db_todo}


@router.delete(
    "/{todo_id}",
    response_model=Envelope,
    response_model_exclude_none=True,
)
def delete_todo(
    todo: models.Todo = Depends(authorize_todo),
    db: Session = Depends(get_db),
) -> dict:
    """Delete a todo the caller owns."""
    try:
        crud.delete_todo(db, todo)
    except SQLAlchemyError:
        logger.exception(f"Deletion of todo {todo.id} failed.")
        raise InternalError("Error deleting todo. Please try again.")
    return {"message": "Todo deleted successfully."}
