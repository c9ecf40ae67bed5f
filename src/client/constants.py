"""Client-side constants and list helpers shared by API consumers."""
import re
from typing import Any, Dict, Iterable, List

# Todo status values accepted by the API
TODO_STATUS = {
    "PENDING": "Pending",
    "COMPLETED": "Completed",
}

# Filter options for a todo list view
FILTER_OPTIONS = {
    "ALL": "All",
    "PENDING": "Pending",
    "COMPLETED": "Completed",
}

MIN_PASSWORD_LENGTH = 6
EMAIL_REGEX = re.compile(r"\S+@\S+\.\S+")


def validate_credentials(email: str, password: str, confirm_password: str | None = None) -> List[str]:
    """Returns the form errors for a login or registration attempt, empty when valid."""
    errors = []
    if not email or not EMAIL_REGEX.search(email):
        errors.append("Please enter a valid email address.")
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        errors.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")
    if confirm_password is not None and confirm_password != password:
        errors.append("Passwords do not match.")
    return errors


def next_status(current_status: str) -> str:
    if current_status == TODO_STATUS["PENDING"]:
        return TODO_STATUS["COMPLETED"]
    return TODO_STATUS["PENDING"]


def filter_todos(todos: Iterable[Dict[str, Any]], selected: str = FILTER_OPTIONS["ALL"]) -> List[Dict[str, Any]]:
    if selected == FILTER_OPTIONS["ALL"]:
        return list(todos)
    return [todo for todo in todos if todo.get("status") == selected]


def summarize_todos(todos: Iterable[Dict[str, Any]]) -> Dict[str, int]:
    """Counts todos per status, as shown next to the filter buttons."""
    todos = list(todos)
    return {
        "total": len(todos),
        "pending": sum(1 for todo in todos if todo.get("status") == TODO_STATUS["PENDING"]),
        "completed": sum(1 for todo in todos if todo.get("status") == TODO_STATUS["COMPLETED"]),
    }
