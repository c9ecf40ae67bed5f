"""Pydantic models for User data.

This module defines the Pydantic schemas for user-related data transfer objects (DTOs).
These schemas are used for request parsing and response serialization. None of the
response schemas carry a password field, so a password hash can never be serialized.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class UserCredentials(BaseModel):
    """Schema for the register and login request bodies.

    Both fields are optional at the parsing layer so that the handlers can
    answer a missing field with the same 400 envelope as a short password.

    Attributes:
        email: The user's email address. Normalized by the credential store.
        password: The user's raw password. Never stored or returned.
    """
    email: Optional[str] = None
    password: Optional[str] = None


class User(BaseModel):
    """Schema for representing a user in API responses.

    Attributes:
        id: The unique integer identifier for the user.
        email: The user's normalized email address.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str


class AuthData(BaseModel):
    """Payload returned by register and login: the user and a fresh token."""
    user: User
    token: str


class CurrentUser(BaseModel):
    """Payload returned by the token verification route."""
    user: User
