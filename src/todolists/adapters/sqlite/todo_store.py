"""SQLite implementation of TodoStore.

Every statement is parameterized and scoped by the authenticated username,
so a user can never observe or mutate another user's rows. Mutations report
success through the affected row count; "not found" and "not owned" both
come back as False.

No transaction spans two statements. In particular the uniqueness check
that callers run before ``add_list``/``set_list_title`` is not atomic with
the write that follows it.
"""

from __future__ import annotations

import asyncio
import sqlite3
import threading
from collections import defaultdict
from typing import Any

from todolists.adapters.sqlite.user_manager import get_user, verify_password
from todolists.adapters.sqlite.utils import row_to_dict
from todolists.models import Todo, TodoList, User
from todolists.repositories import TodoStore
from todolists.utils.sorting import sort_todo_lists

# One connection per process is shared by every worker thread.
_connection_lock = threading.Lock()


class SqliteTodoStore(TodoStore):
    """SQLite todo store scoped to one username."""

    def __init__(self, connection: sqlite3.Connection, username: str | None):
        """Initialize SQLite todo store.

        Args:
            connection: Configured database connection (see connection.py)
            username: Authenticated user every query is scoped to
        """
        self.connection = connection
        self.username = username

    # ------------------------------------------------------------------
    # Statement execution
    # ------------------------------------------------------------------

    def _fetch_all(self, sql: str, params: tuple[Any, ...]) -> list[sqlite3.Row]:
        with _connection_lock:
            return self.connection.execute(sql, params).fetchall()

    def _write(self, sql: str, params: tuple[Any, ...]) -> int:
        with _connection_lock:
            try:
                cursor = self.connection.execute(sql, params)
                self.connection.commit()
            except sqlite3.Error:
                self.connection.rollback()
                raise
            return cursor.rowcount

    def _find_user(self, username: str) -> User | None:
        with _connection_lock:
            return get_user(self.connection, username)

    async def _query(self, sql: str, *params: Any) -> list[sqlite3.Row]:
        """Run a SELECT off the event loop and return all rows."""
        return await asyncio.to_thread(self._fetch_all, sql, params)

    async def _execute(self, sql: str, *params: Any) -> int:
        """Run a write statement off the event loop and return its row count."""
        return await asyncio.to_thread(self._write, sql, params)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def sorted_todo_lists(self) -> list[TodoList]:
        list_rows, todo_rows = await asyncio.gather(
            self._query(
                "SELECT id, title FROM todolists WHERE username = ?"
                " ORDER BY lower(title) ASC, id ASC",
                self.username,
            ),
            self._query(
                "SELECT id, title, done, todolist_id FROM todos"
                " WHERE username = ? ORDER BY id ASC",
                self.username,
            ),
        )
        if not list_rows:
            return []

        todos_by_list: dict[int, list[Todo]] = defaultdict(list)
        for row in todo_rows:
            todo = Todo(**row_to_dict(row))
            todos_by_list[todo.todolist_id].append(todo)

        todo_lists = [
            TodoList(id=row["id"], title=row["title"], todos=todos_by_list[row["id"]])
            for row in list_rows
        ]
        return sort_todo_lists(todo_lists)

    async def load_todo_list(self, todo_list_id: int) -> TodoList | None:
        list_rows, todo_rows = await asyncio.gather(
            self._query(
                "SELECT id, title FROM todolists WHERE id = ? AND username = ?",
                todo_list_id,
                self.username,
            ),
            self._query(
                "SELECT id, title, done, todolist_id FROM todos"
                " WHERE todolist_id = ? AND username = ? ORDER BY id ASC",
                todo_list_id,
                self.username,
            ),
        )
        if not list_rows:
            return None

        row = list_rows[0]
        return TodoList(
            id=row["id"],
            title=row["title"],
            todos=[Todo(**row_to_dict(todo_row)) for todo_row in todo_rows],
        )

    async def sorted_todos(self, todo_list: TodoList) -> list[Todo]:
        rows = await self._query(
            "SELECT id, title, done, todolist_id FROM todos"
            " WHERE todolist_id = ? AND username = ?"
            " ORDER BY done ASC, lower(title) ASC, id ASC",
            todo_list.id,
            self.username,
        )
        return [Todo(**row_to_dict(row)) for row in rows]

    async def load_todo(self, todo_list_id: int, todo_id: int) -> Todo | None:
        rows = await self._query(
            "SELECT id, title, done, todolist_id FROM todos"
            " WHERE id = ? AND todolist_id = ? AND username = ?",
            todo_id,
            todo_list_id,
            self.username,
        )
        if not rows:
            return None
        return Todo(**row_to_dict(rows[0]))

    # ------------------------------------------------------------------
    # Todo mutations
    # ------------------------------------------------------------------

    async def toggle_done_todo(self, todo_list_id: int, todo_id: int) -> bool:
        count = await self._execute(
            "UPDATE todos SET done = NOT done"
            " WHERE todolist_id = ? AND id = ? AND username = ?",
            todo_list_id,
            todo_id,
            self.username,
        )
        return count > 0

    async def mark_done(self, todo_list_id: int, todo_id: int) -> bool:
        return await self._set_done(todo_list_id, todo_id, True)

    async def mark_undone(self, todo_list_id: int, todo_id: int) -> bool:
        return await self._set_done(todo_list_id, todo_id, False)

    async def delete_todo(self, todo_list_id: int, todo_id: int) -> bool:
        count = await self._execute(
            "DELETE FROM todos WHERE todolist_id = ? AND id = ? AND username = ?",
            todo_list_id,
            todo_id,
            self.username,
        )
        return count > 0

    async def mark_all_done(self, todo_list_id: int) -> bool:
        count = await self._execute(
            "UPDATE todos SET done = 1 WHERE todolist_id = ? AND username = ?",
            todo_list_id,
            self.username,
        )
        if count > 0:
            return True
        # Nothing updated: the list is either empty or not ours.
        return await self._list_exists(todo_list_id)

    async def create_todo(self, todo_list_id: int, title: str) -> bool:
        count = await self._execute(
            "INSERT INTO todos (title, todolist_id, username)"
            " SELECT ?, id, username FROM todolists WHERE id = ? AND username = ?",
            title,
            todo_list_id,
            self.username,
        )
        return count > 0

    # ------------------------------------------------------------------
    # List mutations
    # ------------------------------------------------------------------

    async def delete_todo_list(self, todo_list_id: int) -> bool:
        count = await self._execute(
            "DELETE FROM todolists WHERE id = ? AND username = ?",
            todo_list_id,
            self.username,
        )
        return count > 0

    async def unique_list_title(self, title: str) -> bool:
        rows = await self._query(
            "SELECT 1 FROM todolists WHERE title = ? AND username = ? LIMIT 1",
            title,
            self.username,
        )
        return not rows

    async def set_list_title(self, todo_list_id: int, title: str) -> bool:
        count = await self._execute(
            "UPDATE todolists SET title = ? WHERE id = ? AND username = ?",
            title,
            todo_list_id,
            self.username,
        )
        return count > 0

    async def add_list(self, title: str) -> bool:
        count = await self._execute(
            "INSERT INTO todolists (title, username) VALUES (?, ?)",
            title,
            self.username,
        )
        return count > 0

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    async def existing_user(self, username: str, password: str) -> bool:
        user = await asyncio.to_thread(self._find_user, username)
        if user is None:
            return False
        return await asyncio.to_thread(verify_password, password, user.password_hash)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _set_done(self, todo_list_id: int, todo_id: int, done: bool) -> bool:
        count = await self._execute(
            "UPDATE todos SET done = ? WHERE todolist_id = ? AND id = ? AND username = ?",
            done,
            todo_list_id,
            todo_id,
            self.username,
        )
        return count > 0

    async def _list_exists(self, todo_list_id: int) -> bool:
        rows = await self._query(
            "SELECT 1 FROM todolists WHERE id = ? AND username = ?",
            todo_list_id,
            self.username,
        )
        return bool(rows)
