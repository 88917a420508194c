"""Todolists domain models.

Pydantic models for the core entities (users, todo lists and todos),
the application configuration and the user-facing exceptions.
"""

from .config_models import AppConfig
from .core import Todo, TodoList, User
from .exceptions import (
    AuthenticationError,
    NotFoundError,
    TitleValidationError,
    TodoListsError,
)

__all__ = [
    # Domain models
    "Todo",
    "TodoList",
    "User",
    # Config models
    "AppConfig",
    # Exceptions
    "TodoListsError",
    "NotFoundError",
    "TitleValidationError",
    "AuthenticationError",
]
