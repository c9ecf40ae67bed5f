# src/core/exceptions.py
"""
Error taxonomy shared by the stores, the request gates and the routers.

Every error carries the HTTP status it maps to and a client-facing message.
The exception handlers registered in `src.main` render them into the
`{"success": false, "message": ...}` failure envelope.
"""

from typing import Dict, Optional


class TodoAppError(Exception):
    """Base class for all errors surfaced to API clients."""
    status_code: int = 500
    default_message: str = "An unexpected error occurred."

    def __init__(self, message: Optional[str] = None, headers: Optional[Dict[str, str]] = None):
        self.message = message or self.default_message
        self.headers = headers
        super().__init__(self.message)


class ValidationError(TodoAppError):
    """Malformed or missing input."""
    status_code = 400
    default_message = "Invalid request."


class NoFieldsProvided(ValidationError):
    default_message = "At least one field (title or status) is required for update."


class Unauthenticated(TodoAppError):
    """Missing, invalid or expired credentials, or an unknown token subject."""
    status_code = 401
    default_message = "Authentication required. Please provide a valid token."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message, headers={"WWW-Authenticate": "Bearer"})


class InvalidToken(Unauthenticated):
    default_message = "Invalid or expired token. Please login again."


class ExpiredToken(InvalidToken):
    pass


class Forbidden(TodoAppError):
    status_code = 403
    default_message = "Access denied."


class NotFound(TodoAppError):
    status_code = 404
    default_message = "Not found."


class Conflict(TodoAppError):
    status_code = 409
    default_message = "Resource already exists."


class DuplicateEmail(Conflict):
    default_message = "User with this email already exists."


class InternalError(TodoAppError):
    """Unexpected failure, typically the store being unavailable."""
    status_code = 500
