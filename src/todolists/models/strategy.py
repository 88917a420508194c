"""
Strategy Pattern: Storage Strategy Container

The persistence mode is decided once per command invocation: the Context
Manager builds a StrategyContext from the configuration and the session and
hands it to the services. Services never branch on the storage type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import Any

from todolists.repositories import TodoStore
from todolists.utils.id_generator import IdGenerator


class StorageStrategy(ABC):
    """
    Abstract base class for storage strategies.

    A strategy encapsulates the store implementation for a given backend
    (session memory or SQLite).
    """

    @abstractmethod
    def get_todo_store(self) -> TodoStore:
        """Get the todo store implementation for this strategy."""

    @property
    @abstractmethod
    def storage_type(self) -> str:
        """Get storage type identifier (for logging/debugging)."""

    @property
    def requires_authentication(self) -> bool:
        """Whether commands must run in a signed-in session."""
        return False


class MemoryStrategy(StorageStrategy):
    """
    Session memory storage strategy.

    The store keeps its state inside the session mapping.
    """

    def __init__(
        self,
        session: MutableMapping[str, Any],
        next_id: IdGenerator | None = None,
        users: Mapping[str, str] | None = None,
    ):
        """
        Initialize memory strategy.

        Args:
            session: Session mapping that owns the todo lists
            next_id: Id generator for new lists and todos
            users: Optional username -> bcrypt hash mapping
        """
        from todolists.adapters.memory import MemoryTodoStore

        self._todo_store = MemoryTodoStore(session, next_id=next_id, users=users)

    def get_todo_store(self) -> TodoStore:
        return self._todo_store

    @property
    def storage_type(self) -> str:
        return "memory"


class SqliteStrategy(StorageStrategy):
    """
    SQLite storage strategy.

    The store is scoped to the username of the signed-in session.
    """

    def __init__(self, db_path: str | Path | None, username: str | None):
        """
        Initialize SQLite strategy.

        Args:
            db_path: Path to SQLite database file (None for the default)
            username: Signed-in user, None before sign-in
        """
        from todolists.adapters.sqlite.connection import get_connection
        from todolists.adapters.sqlite.todo_store import SqliteTodoStore

        self.db_path = db_path
        self._todo_store = SqliteTodoStore(get_connection(db_path), username)

    def get_todo_store(self) -> TodoStore:
        return self._todo_store

    @property
    def storage_type(self) -> str:
        return "sqlite"

    @property
    def requires_authentication(self) -> bool:
        return True


class StrategyContext:
    """
    Strategy context that provides access to the configured store.

    Usage:
        strategy = MemoryStrategy(session)
        context = StrategyContext(strategy)
        lists = await context.todo_store.sorted_todo_lists()
    """

    def __init__(self, strategy: StorageStrategy):
        self._strategy = strategy

    @property
    def todo_store(self) -> TodoStore:
        """Get todo store from current strategy."""
        return self._strategy.get_todo_store()

    @property
    def storage_type(self) -> str:
        """Get storage type (for logging/debugging only)."""
        return self._strategy.storage_type

    @property
    def requires_authentication(self) -> bool:
        """Whether the current strategy needs a signed-in session."""
        return self._strategy.requires_authentication

    @property
    def strategy(self) -> StorageStrategy:
        """Get underlying strategy."""
        return self._strategy
