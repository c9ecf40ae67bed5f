"""
HTTP client for the Todo API.

The client attaches the stored bearer token to every request. When a protected
call comes back 401 it clears the stored token and invokes the
`on_unauthenticated` callback supplied by whoever composed it, instead of
reaching for any global navigation state.
"""

import logging
import os
from typing import Any, Callable, Dict, List, Optional

import httpx

from src.client.constants import TODO_STATUS, next_status

logger = logging.getLogger(__name__)

DEFAULT_API_URL = os.environ.get("TODO_API_URL", "http://localhost:3000/api")


class ApiError(Exception):
    """Raised when the API answers with a failure envelope."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class MemoryTokenStore:
    """Keeps the bearer token for the lifetime of the process."""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class TodoApiClient:
    """
    Thin wrapper over the REST surface.

    Args:
        base_url: API root including the prefix, e.g. "http://localhost:3000/api".
        http_client: An httpx.Client to send requests with. One is created when omitted.
        token_store: Where the bearer token is kept between calls.
        on_unauthenticated: Called after a protected request is rejected with 401.
        timeout: Request timeout in seconds for the default http client.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        http_client: Optional[httpx.Client] = None,
        token_store: Optional[MemoryTokenStore] = None,
        on_unauthenticated: Optional[Callable[[], None]] = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = http_client or httpx.Client(timeout=timeout)
        self.token_store = token_store or MemoryTokenStore()
        self.on_unauthenticated = on_unauthenticated

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None, protected: bool = True) -> Dict[str, Any]:
        headers = {"Content-Type": "application/json"}
        token = self.token_store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        response = self._http.request(method, f"{self.base_url}{path}", json=json, headers=headers)
        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.status_code == 401 and protected:
            logger.info("Session rejected by the API; clearing stored token.")
            self.token_store.clear()
            if self.on_unauthenticated:
                self.on_unauthenticated()

        if response.is_error:
            message = body.get("message") if isinstance(body, dict) else None
            raise ApiError(response.status_code, message or response.reason_phrase)
        return body

    # --- Auth ---

    def register(self, email: str, password: str) -> Dict[str, Any]:
        data = self._request("POST", "/auth/register", {"email": email, "password": password}, protected=False)["data"]
        self.token_store.set(data["token"])
        return data

    def login(self, email: str, password: str) -> Dict[str, Any]:
        data = self._request("POST", "/auth/login", {"email": email, "password": password}, protected=False)["data"]
        self.token_store.set(data["token"])
        return data

    def logout(self) -> None:
        self.token_store.clear()

    def me(self) -> Dict[str, Any]:
        return self._request("GET", "/auth/me")["data"]["user"]

    # --- Todos ---

    def list_todos(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/todos")["data"]

    def create_todo(self, title: str, status: str = TODO_STATUS["PENDING"]) -> Dict[str, Any]:
        return self._request("POST", "/todos", {"title": title, "status": status})["data"]

    def update_todo(self, todo_id: int, **updates: Any) -> Dict[str, Any]:
        return self._request("PUT", f"/todos/{todo_id}", updates)["data"]

    def delete_todo(self, todo_id: int) -> int:
        self._request("DELETE", f"/todos/{todo_id}")
        return todo_id

    def toggle_todo_status(self, todo_id: int, current_status: str) -> Dict[str, Any]:
        return self.update_todo(todo_id, status=next_status(current_status))
