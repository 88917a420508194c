"""Adapters module - Store implementations for different storage backends.

This package contains concrete implementations (adapters) of the TodoStore
interface:
- memory: Session-scoped in-process storage
- sqlite: Relational database storage
"""

from .memory import MemoryTodoStore
from .sqlite import SqliteTodoStore

__all__ = [
    "MemoryTodoStore",
    "SqliteTodoStore",
]
