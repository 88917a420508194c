"""Session-scoped, in-process implementation of TodoStore.

State lives in the caller's session mapping under ``session["todo_lists"]``
as plain dict records, so its lifetime is the session's lifetime and it can
be serialized with the session. Every read rebuilds models from those
records, so callers never hold a reference into the stored state.

There is no locking: two concurrent commands sharing one session can lose
each other's writes.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from todolists.adapters.seed_data import make_seed_data
from todolists.adapters.sqlite.user_manager import verify_password
from todolists.models import Todo, TodoList
from todolists.repositories import TodoStore
from todolists.utils.id_generator import IdGenerator, SequentialIdGenerator
from todolists.utils.sorting import sort_todo_lists, sort_todos

SESSION_KEY = "todo_lists"
# Highest id ever issued; deleted records keep their ids retired.
LAST_ID_KEY = "last_id"


class MemoryTodoStore(TodoStore):
    """In-memory todo store bound to one session."""

    def __init__(
        self,
        session: MutableMapping[str, Any],
        next_id: IdGenerator | None = None,
        users: Mapping[str, str] | None = None,
    ):
        """Initialize the store, seeding the session on first use.

        Args:
            session: Mutable session mapping that owns the state
            next_id: Id generator shared by lists and todos
            users: Optional mapping of username to bcrypt password hash
        """
        self._session = session
        self._next_id = next_id or SequentialIdGenerator()
        self._users = dict(users or {})
        if session.get(SESSION_KEY) is None:
            session[SESSION_KEY] = make_seed_data(self._new_id)
        self._todo_lists: list[dict[str, Any]] = session[SESSION_KEY]

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def sorted_todo_lists(self) -> list[TodoList]:
        todo_lists = [TodoList.model_validate(record) for record in self._todo_lists]
        return sort_todo_lists(todo_lists)

    async def load_todo_list(self, todo_list_id: int) -> TodoList | None:
        record = self._find_list(todo_list_id)
        if record is None:
            return None
        return TodoList.model_validate(record)

    async def sorted_todos(self, todo_list: TodoList) -> list[Todo]:
        return [todo.model_copy() for todo in sort_todos(todo_list.todos)]

    async def load_todo(self, todo_list_id: int, todo_id: int) -> Todo | None:
        record = self._find_todo(todo_list_id, todo_id)
        if record is None:
            return None
        return Todo.model_validate(record)

    def find_index_of(self, todo: Todo, todo_list: TodoList) -> int:
        """Structural index of a todo (matched by id) in a list, -1 if absent."""
        for index, candidate in enumerate(todo_list.todos):
            if candidate.id == todo.id:
                return index
        return -1

    # ------------------------------------------------------------------
    # Todo mutations
    # ------------------------------------------------------------------

    async def toggle_done_todo(self, todo_list_id: int, todo_id: int) -> bool:
        record = self._find_todo(todo_list_id, todo_id)
        if record is None:
            return False
        record["done"] = not record["done"]
        return True

    async def mark_done(self, todo_list_id: int, todo_id: int) -> bool:
        return self._set_done(todo_list_id, todo_id, True)

    async def mark_undone(self, todo_list_id: int, todo_id: int) -> bool:
        return self._set_done(todo_list_id, todo_id, False)

    def remove_at(self, index: int, todo_list: TodoList) -> Todo:
        """Remove the todo at a structural position of the stored list.

        Args:
            index: Position of the todo, as seen in todo_list
            todo_list: List the index refers to (a copy is fine)

        Returns:
            The removed todo

        Raises:
            IndexError: If index is not a valid position of the list
        """
        self._validate_index(index, todo_list)
        record = self._find_list(todo_list.id)
        if record is None or index >= len(record["todos"]):
            raise IndexError(f"invalid index: {index}")
        return Todo.model_validate(record["todos"].pop(index))

    async def delete_todo(self, todo_list_id: int, todo_id: int) -> bool:
        todo_list = await self.load_todo_list(todo_list_id)
        if todo_list is None:
            return False
        index = self.find_index_of(Todo(id=todo_id, title=""), todo_list)
        if index < 0:
            return False
        self.remove_at(index, todo_list)
        return True

    async def mark_all_done(self, todo_list_id: int) -> bool:
        record = self._find_list(todo_list_id)
        if record is None:
            return False
        for todo in record["todos"]:
            todo["done"] = True
        return True

    async def create_todo(self, todo_list_id: int, title: str) -> bool:
        record = self._find_list(todo_list_id)
        if record is None:
            return False
        record["todos"].append({"id": self._new_id(), "title": title, "done": False})
        return True

    # ------------------------------------------------------------------
    # List mutations
    # ------------------------------------------------------------------

    async def delete_todo_list(self, todo_list_id: int) -> bool:
        for index, record in enumerate(self._todo_lists):
            if record["id"] == todo_list_id:
                del self._todo_lists[index]
                return True
        return False

    async def unique_list_title(self, title: str) -> bool:
        return not any(record["title"] == title for record in self._todo_lists)

    async def set_list_title(self, todo_list_id: int, title: str) -> bool:
        record = self._find_list(todo_list_id)
        if record is None:
            return False
        record["title"] = title
        return True

    async def add_list(self, title: str) -> bool:
        self._todo_lists.append({"id": self._new_id(), "title": title, "todos": []})
        return True

    async def existing_user(self, username: str, password: str) -> bool:
        password_hash = self._users.get(username)
        if password_hash is None:
            return False
        return verify_password(password, password_hash)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _new_id(self) -> int:
        new_id = self._next_id()
        self._session[LAST_ID_KEY] = max(self._session.get(LAST_ID_KEY, 0), new_id)
        return new_id

    def _find_list(self, todo_list_id: int) -> dict[str, Any] | None:
        for record in self._todo_lists:
            if record["id"] == todo_list_id:
                return record
        return None

    def _find_todo(self, todo_list_id: int, todo_id: int) -> dict[str, Any] | None:
        todo_list = self._find_list(todo_list_id)
        if todo_list is None:
            return None
        for todo in todo_list["todos"]:
            if todo["id"] == todo_id:
                return todo
        return None

    def _set_done(self, todo_list_id: int, todo_id: int, done: bool) -> bool:
        record = self._find_todo(todo_list_id, todo_id)
        if record is None:
            return False
        record["done"] = done
        return True

    @staticmethod
    def _validate_index(index: int, todo_list: TodoList) -> None:
        if not 0 <= index < len(todo_list.todos):
            raise IndexError(f"invalid index: {index}")
