"""Store interfaces for todolists.

This package contains the abstract base class that defines the contract for
todo list persistence. It is the "Port" in the Hexagonal Architecture.

Implementations (Adapters) are in:
- todolists.adapters.memory (session storage)
- todolists.adapters.sqlite (relational storage)
"""

from .repository import TodoStore

__all__ = ["TodoStore"]
