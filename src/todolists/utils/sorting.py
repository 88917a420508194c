"""Sorting and partitioning helpers shared by every store.

Lists sort "not done" first, then "done"; each group by title,
case-insensitively. Todos sort by done status, then by title. Python's
sort is stable, so equal titles keep their source order.
"""

from __future__ import annotations

from collections.abc import Iterable

from todolists.models import Todo, TodoList


def title_key(item: Todo | TodoList) -> str:
    """Case-insensitive sort key for anything with a title."""
    return item.title.lower()


def is_done_todo_list(todo_list: TodoList) -> bool:
    """A list is done when it has at least one todo and all of them are done."""
    return len(todo_list.todos) > 0 and all(todo.done for todo in todo_list.todos)


def partition_todo_lists(
    todo_lists: Iterable[TodoList],
) -> tuple[list[TodoList], list[TodoList]]:
    """Split lists into (not done, done), preserving order within each group."""
    undone: list[TodoList] = []
    done: list[TodoList] = []
    for todo_list in todo_lists:
        if is_done_todo_list(todo_list):
            done.append(todo_list)
        else:
            undone.append(todo_list)
    return undone, done


def sort_todo_lists(todo_lists: Iterable[TodoList]) -> list[TodoList]:
    """Return not-done lists followed by done lists, each sorted by title."""
    undone, done = partition_todo_lists(todo_lists)
    return sorted(undone, key=title_key) + sorted(done, key=title_key)


def sort_todos(todos: Iterable[Todo]) -> list[Todo]:
    """Return todos with not-done items first, each group sorted by title."""
    return sorted(todos, key=lambda todo: (todo.done, title_key(todo)))
