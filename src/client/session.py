"""
Client-side authentication state.

A session starts in UNKNOWN and only becomes AUTHENTICATED after the API has
confirmed the stored token (or after a successful login or registration).
A stored token on its own never counts as being logged in.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import httpx

from src.client.api import DEFAULT_API_URL, ApiError, MemoryTokenStore, TodoApiClient

logger = logging.getLogger(__name__)


class AuthStatus(str, enum.Enum):
    UNKNOWN = "unknown"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


@dataclass(frozen=True)
class AuthState:
    status: AuthStatus
    user: Optional[Dict[str, Any]] = None

    @property
    def is_authenticated(self) -> bool:
        return self.status is AuthStatus.AUTHENTICATED


class AuthSession:
    """Tracks who the client is logged in as."""

    def __init__(self, client: TodoApiClient, on_logout: Optional[Callable[[], None]] = None):
        self.client = client
        self.on_logout = on_logout
        self.state = AuthState(AuthStatus.UNKNOWN)

    def _set(self, status: AuthStatus, user: Optional[Dict[str, Any]] = None) -> AuthState:
        self.state = AuthState(status, user)
        return self.state

    def resolve(self) -> AuthState:
        """Verifies the stored token against the API and settles the state."""
        if not self.client.token_store.get():
            return self._set(AuthStatus.UNAUTHENTICATED)
        try:
            user = self.client.me()
        except ApiError as e:
            if e.status_code == 401:
                return self._set(AuthStatus.UNAUTHENTICATED)
            raise
        return self._set(AuthStatus.AUTHENTICATED, user)

    def login(self, email: str, password: str) -> AuthState:
        data = self.client.login(email, password)
        return self._set(AuthStatus.AUTHENTICATED, data["user"])

    def register(self, email: str, password: str) -> AuthState:
        data = self.client.register(email, password)
        return self._set(AuthStatus.AUTHENTICATED, data["user"])

    def logout(self) -> AuthState:
        self.client.logout()
        return self.handle_unauthenticated()

    def handle_unauthenticated(self) -> AuthState:
        """Callback for the API client when the server rejects the session."""
        state = self._set(AuthStatus.UNAUTHENTICATED)
        if self.on_logout:
            self.on_logout()
        return state


def create_session(
    base_url: str = DEFAULT_API_URL,
    http_client: Optional[httpx.Client] = None,
    token_store: Optional[MemoryTokenStore] = None,
    on_logout: Optional[Callable[[], None]] = None,
) -> AuthSession:
    """Wires a client and a session together so 401s flip the session state."""
    client = TodoApiClient(base_url=base_url, http_client=http_client, token_store=token_store)
    session = AuthSession(client, on_logout=on_logout)
    client.on_unauthenticated = session.handle_unauthenticated
    return session
