# src/api/auth.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core import security
from src.core.exceptions import InternalError, Unauthenticated, ValidationError
from src.db import crud, models
from src.db.database import get_db
from src.schemas import user
from src.schemas.response import Envelope

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

BEARER_SCHEME = "Bearer"


def _auth_payload(user_obj: models.User) -> user.AuthData:
    token = security.create_access_token(user_obj.id)
    return user.AuthData(user=user.User.model_validate(user_obj), token=token)


@router.post(
    "/register",
    response_model=Envelope[user.AuthData],
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
)
def register(credentials: user.UserCredentials, db: Session = Depends(get_db)) -> dict:
    try:
        db_user = crud.create_user(db, email=credentials.email, password=credentials.password)
    except SQLAlchemyError:
        logger.exception("User registration failed.")
        raise InternalError("Error registering user. Please try again.")
    return {"message": "User registered successfully.", "data": _auth_payload(db_user)}


@router.post(
    "/login",
    response_model=Envelope[user.AuthData],
    response_model_exclude_none=True,
)
def login(credentials: user.UserCredentials, db: Session = Depends(get_db)) -> dict:
    if not credentials.email or not credentials.password:
        raise ValidationError("Email and password are required.")
    try:
        user_auth = crud.authenticate_user(db, email=credentials.email, password=credentials.password)
    except SQLAlchemyError:
        logger.exception("Login lookup failed.")
        raise InternalError("Error during login. Please try again.")
    if user_auth is None:
        # Same answer for an unknown email and a wrong password.
        raise Unauthenticated("Invalid email or password.")
    return {"message": "Login successful.", "data": _auth_payload(user_auth)}


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security.bearer_scheme),
    db: Session = Depends(get_db),
) -> models.User:
    """
    Resolves the bearer token on a request to a live user.

    Rejects the request when the Authorization header is missing or is not a
    bearer credential, when the token fails verification, and when its subject
    no longer exists. The resolved user is also stored on `request.state.user`.
    """
    if credentials is None or credentials.scheme != BEARER_SCHEME:
        raise Unauthenticated()

    token_data = security.decode_access_token(credentials.credentials)

    try:
        user_obj = crud.get_user_by_id(db, token_data.user_id)
    except SQLAlchemyError:
        logger.exception("Could not resolve token subject.")
        raise InternalError("Authentication error occurred.")
    if user_obj is None:
        raise Unauthenticated("User not found. Token is invalid.")

    request.state.user = user_obj
    return user_obj


@router.get(
    "/me",
    response_model=Envelope[user.CurrentUser],
    response_model_exclude_none=True,
)
def read_users_me(current_user: models.User = Depends(get_current_user)) -> dict:
    return {"data": {"user": user.User.model_validate(current_user)}}
