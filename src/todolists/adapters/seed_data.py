"""Initial dataset for a fresh in-memory store."""

from __future__ import annotations

from typing import Any

from todolists.utils.id_generator import IdGenerator

SEED_TODO_LISTS: list[tuple[str, list[tuple[str, bool]]]] = [
    (
        "Work Todos",
        [
            ("Get coffee", True),
            ("Chat with co-workers", True),
            ("Duck out of meeting", False),
        ],
    ),
    (
        "Home Todos",
        [
            ("Feed the cats", True),
            ("Go to bed", True),
            ("Buy milk", True),
            ("Study for the exam", True),
        ],
    ),
    ("Additional Todos", []),
    ("social todos", [("Go to Libby's birthday party", False)]),
]


def make_seed_data(next_id: IdGenerator) -> list[dict[str, Any]]:
    """Build the seed lists as plain records, drawing ids from next_id."""
    todo_lists = []
    for title, todos in SEED_TODO_LISTS:
        todo_list: dict[str, Any] = {"id": next_id(), "title": title, "todos": []}
        for todo_title, done in todos:
            todo_list["todos"].append(
                {"id": next_id(), "title": todo_title, "done": done}
            )
        todo_lists.append(todo_list)
    return todo_lists
