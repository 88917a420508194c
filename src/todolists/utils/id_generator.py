"""Identifier generation for the in-memory store."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Mapping
from typing import Any

IdGenerator = Callable[[], int]


class SequentialIdGenerator:
    """Monotonically increasing integer ids.

    One generator serves both lists and todos, so every id it hands out
    is unique for the lifetime of the generator.
    """

    def __init__(self, start: int = 1):
        if start < 1:
            raise ValueError(f"start must be positive, got {start}")
        self._counter = itertools.count(start)

    def __call__(self) -> int:
        return next(self._counter)


def max_stored_id(todo_lists: Iterable[Mapping[str, Any]]) -> int:
    """Highest list or todo id in stored list records (0 when empty)."""
    highest = 0
    for todo_list in todo_lists:
        highest = max(highest, todo_list["id"])
        for todo in todo_list.get("todos", []):
            highest = max(highest, todo["id"])
    return highest


def generator_after(
    todo_lists: Iterable[Mapping[str, Any]], high_water: int = 0
) -> SequentialIdGenerator:
    """Generator resuming after every id already handed out.

    Args:
        todo_lists: Stored list records
        high_water: Highest id ever issued, including ids of deleted records
    """
    return SequentialIdGenerator(start=max(high_water, max_stored_id(todo_lists)) + 1)
