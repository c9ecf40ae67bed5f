from .api import ApiError, MemoryTokenStore, TodoApiClient
from .constants import FILTER_OPTIONS, TODO_STATUS, filter_todos, summarize_todos, validate_credentials
from .session import AuthSession, AuthState, AuthStatus, create_session

__all__ = [
    "ApiError",
    "MemoryTokenStore",
    "TodoApiClient",
    "FILTER_OPTIONS",
    "TODO_STATUS",
    "filter_todos",
    "summarize_todos",
    "validate_credentials",
    "AuthSession",
    "AuthState",
    "AuthStatus",
    "create_session",
]
