"""Todo service - Business logic for todo lists and todos.

The store reports not-found as None/False and never validates titles; this
service applies the caller-side rules on top of it: titles are trimmed and
length-checked, list titles are checked for uniqueness, and every falsy
store result becomes a NotFoundError.
"""

from __future__ import annotations

from todolists.models import NotFoundError, TitleValidationError, Todo, TodoList
from todolists.repositories import TodoStore


class TodoService:
    """Service for todo list business logic."""

    def __init__(self, store: TodoStore, title_max_length: int = 100):
        """Initialize the todo service.

        Args:
            store: TodoStore implementation for data access
            title_max_length: Maximum accepted title length
        """
        self.store = store
        self.title_max_length = title_max_length

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _title_errors(self, title: str, kind: str) -> list[str]:
        if len(title) < 1:
            return [f"The {kind.lower()} title is required."]
        if len(title) > self.title_max_length:
            return [
                f"{kind} title must be between 1 and {self.title_max_length} characters."
            ]
        return []

    async def _validate_list_title(self, title: str) -> str:
        title = title.strip()
        errors = self._title_errors(title, "List")
        if not await self.store.unique_list_title(title):
            errors.append("Please enter a unique title.")
        if errors:
            raise TitleValidationError(errors)
        return title

    def _validate_todo_title(self, title: str) -> str:
        title = title.strip()
        errors = self._title_errors(title, "Todo")
        if errors:
            raise TitleValidationError(errors)
        return title

    # ------------------------------------------------------------------
    # Todo lists
    # ------------------------------------------------------------------

    async def list_todo_lists(self) -> list[TodoList]:
        """All lists of the current user, not-done first, sorted by title."""
        return await self.store.sorted_todo_lists()

    async def get_todo_list(self, todo_list_id: int) -> TodoList:
        """Load a list with its todos sorted for display.

        Raises:
            NotFoundError: If the list does not exist
        """
        todo_list = await self.store.load_todo_list(todo_list_id)
        if todo_list is None:
            raise NotFoundError()
        todos = await self.store.sorted_todos(todo_list)
        return todo_list.model_copy(update={"todos": todos})

    async def create_todo_list(self, title: str) -> str:
        """Create a list after validating its title.

        Returns:
            The stored (trimmed) title

        Raises:
            TitleValidationError: If the title is empty, too long or taken
        """
        title = await self._validate_list_title(title)
        if not await self.store.add_list(title):
            raise NotFoundError()
        return title

    async def rename_todo_list(self, todo_list_id: int, title: str) -> str:
        """Rename a list after validating the new title.

        Raises:
            NotFoundError: If the list does not exist
            TitleValidationError: If the title is empty, too long or taken
        """
        if await self.store.load_todo_list(todo_list_id) is None:
            raise NotFoundError()
        title = await self._validate_list_title(title)
        if not await self.store.set_list_title(todo_list_id, title):
            raise NotFoundError()
        return title

    async def delete_todo_list(self, todo_list_id: int) -> None:
        """Delete a list and all of its todos."""
        if not await self.store.delete_todo_list(todo_list_id):
            raise NotFoundError()

    async def complete_all(self, todo_list_id: int) -> None:
        """Mark every todo of a list as done."""
        if not await self.store.mark_all_done(todo_list_id):
            raise NotFoundError()

    # ------------------------------------------------------------------
    # Todos
    # ------------------------------------------------------------------

    async def add_todo(self, todo_list_id: int, title: str) -> str:
        """Append a todo to a list.

        Raises:
            NotFoundError: If the list does not exist
            TitleValidationError: If the title is empty or too long
        """
        if await self.store.load_todo_list(todo_list_id) is None:
            raise NotFoundError()
        title = self._validate_todo_title(title)
        if not await self.store.create_todo(todo_list_id, title):
            raise NotFoundError()
        return title

    async def toggle_todo(self, todo_list_id: int, todo_id: int) -> Todo:
        """Invert a todo's done flag and return its new state."""
        if not await self.store.toggle_done_todo(todo_list_id, todo_id):
            raise NotFoundError()
        todo = await self.store.load_todo(todo_list_id, todo_id)
        if todo is None:
            raise NotFoundError()
        return todo

    async def delete_todo(self, todo_list_id: int, todo_id: int) -> None:
        """Delete a single todo."""
        if not await self.store.delete_todo(todo_list_id, todo_id):
            raise NotFoundError()
