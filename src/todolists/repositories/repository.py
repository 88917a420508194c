"""Store abstraction layer for todolists.

This module defines the abstract base class (interface) shared by every
storage backend, following the hexagonal architecture (Ports & Adapters)
pattern. Concrete stores live in:

- todolists.adapters.memory (session-scoped, in-process state)
- todolists.adapters.sqlite (relational tables scoped by username)

Not-found is never an exception at this layer: reads return None and
mutations return False, and callers turn that into a user-visible failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from todolists.models import Todo, TodoList
from todolists.utils.sorting import is_done_todo_list


class TodoStore(ABC):
    """Abstract base class for todo list persistence operations.

    Both backends expose identical semantics so the call site does not need
    to know which one it talks to. Every operation is awaitable; the
    in-memory store simply never suspends.
    """

    def is_done_todo_list(self, todo_list: TodoList) -> bool:
        """Whether a list has at least one todo and all of them are done."""
        return is_done_todo_list(todo_list)

    @abstractmethod
    async def sorted_todo_lists(self) -> list[TodoList]:
        """List every todo list of the current user with its todos.

        Returns:
            Not-done lists followed by done lists, each group sorted by
            title case-insensitively. Todos inside each list are unsorted.
        """
        raise NotImplementedError(
            "TodoStore.sorted_todo_lists() must be implemented by adapter"
        )

    @abstractmethod
    async def load_todo_list(self, todo_list_id: int) -> TodoList | None:
        """Load one todo list with its todos.

        Args:
            todo_list_id: List identifier

        Returns:
            The list, or None if it does not exist for the current user
        """
        raise NotImplementedError(
            "TodoStore.load_todo_list() must be implemented by adapter"
        )

    @abstractmethod
    async def sorted_todos(self, todo_list: TodoList) -> list[Todo]:
        """Todos of a list, not-done first, each group sorted by title.

        Args:
            todo_list: List whose todos are wanted

        Returns:
            Sorted todos (empty if the list is unknown)
        """
        raise NotImplementedError(
            "TodoStore.sorted_todos() must be implemented by adapter"
        )

    @abstractmethod
    async def load_todo(self, todo_list_id: int, todo_id: int) -> Todo | None:
        """Load one todo.

        Args:
            todo_list_id: Owning list identifier
            todo_id: Todo identifier

        Returns:
            The todo, or None if either the list or the todo is not found
        """
        raise NotImplementedError("TodoStore.load_todo() must be implemented by adapter")

    @abstractmethod
    async def toggle_done_todo(self, todo_list_id: int, todo_id: int) -> bool:
        """Invert the done flag of a todo.

        Returns:
            True if the todo was found and toggled, False otherwise
        """
        raise NotImplementedError(
            "TodoStore.toggle_done_todo() must be implemented by adapter"
        )

    @abstractmethod
    async def mark_done(self, todo_list_id: int, todo_id: int) -> bool:
        """Set a todo's done flag. Idempotent.

        Returns:
            True if the todo was found, False otherwise
        """
        raise NotImplementedError("TodoStore.mark_done() must be implemented by adapter")

    @abstractmethod
    async def mark_undone(self, todo_list_id: int, todo_id: int) -> bool:
        """Clear a todo's done flag. Idempotent.

        Returns:
            True if the todo was found, False otherwise
        """
        raise NotImplementedError(
            "TodoStore.mark_undone() must be implemented by adapter"
        )

    @abstractmethod
    async def delete_todo(self, todo_list_id: int, todo_id: int) -> bool:
        """Delete a todo.

        Returns:
            True if a todo was removed, False if it was not found
        """
        raise NotImplementedError(
            "TodoStore.delete_todo() must be implemented by adapter"
        )

    @abstractmethod
    async def mark_all_done(self, todo_list_id: int) -> bool:
        """Mark every todo of a list as done.

        Returns:
            True if the list exists (even when it has no todos), False otherwise
        """
        raise NotImplementedError(
            "TodoStore.mark_all_done() must be implemented by adapter"
        )

    @abstractmethod
    async def create_todo(self, todo_list_id: int, title: str) -> bool:
        """Append a new, not-done todo to a list.

        Args:
            todo_list_id: Owning list identifier
            title: Todo title (already validated by the caller)

        Returns:
            True if the todo was created, False if the list was not found
        """
        raise NotImplementedError(
            "TodoStore.create_todo() must be implemented by adapter"
        )

    @abstractmethod
    async def delete_todo_list(self, todo_list_id: int) -> bool:
        """Delete a list together with all of its todos.

        Returns:
            True if the list was removed, False if it was not found
        """
        raise NotImplementedError(
            "TodoStore.delete_todo_list() must be implemented by adapter"
        )

    @abstractmethod
    async def unique_list_title(self, title: str) -> bool:
        """Check that no list of the current user has exactly this title.

        The comparison is exact. The check and the following write are
        separate operations, so two concurrent callers can both pass it.

        Returns:
            True if the title is not in use, False otherwise
        """
        raise NotImplementedError(
            "TodoStore.unique_list_title() must be implemented by adapter"
        )

    @abstractmethod
    async def set_list_title(self, todo_list_id: int, title: str) -> bool:
        """Rename a list.

        Returns:
            True if the list was found, False otherwise
        """
        raise NotImplementedError(
            "TodoStore.set_list_title() must be implemented by adapter"
        )

    @abstractmethod
    async def add_list(self, title: str) -> bool:
        """Create a new empty list.

        Returns:
            True if the list was created
        """
        raise NotImplementedError("TodoStore.add_list() must be implemented by adapter")

    @abstractmethod
    async def existing_user(self, username: str, password: str) -> bool:
        """Verify credentials.

        Unknown users and wrong passwords both yield False.

        Returns:
            True if the user exists and the password matches its hash
        """
        raise NotImplementedError(
            "TodoStore.existing_user() must be implemented by adapter"
        )
