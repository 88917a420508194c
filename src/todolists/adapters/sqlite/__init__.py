"""SQLite adapter module - Relational storage implementation."""

from todolists.adapters.sqlite.connection import DatabaseConnection, get_connection
from todolists.adapters.sqlite.todo_store import SqliteTodoStore
from todolists.adapters.sqlite.user_manager import (
    create_user,
    get_user,
    hash_password,
    verify_password,
)

__all__ = [
    "DatabaseConnection",
    "SqliteTodoStore",
    "create_user",
    "get_connection",
    "get_user",
    "hash_password",
    "verify_password",
]
