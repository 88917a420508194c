"""Contract tests run against every TodoStore implementation.

Each test drives the store only through the shared interface, so both
backends must agree on the observable behaviour.
"""

from __future__ import annotations

import pytest

from todolists.adapters.memory import SESSION_KEY, MemoryTodoStore
from todolists.adapters.sqlite.todo_store import SqliteTodoStore
from todolists.repositories import TodoStore
from todolists.utils.id_generator import SequentialIdGenerator


@pytest.fixture(params=["memory", "sqlite"])
def store(request) -> TodoStore:
    if request.param == "memory":
        return MemoryTodoStore({SESSION_KEY: []}, next_id=SequentialIdGenerator())
    return SqliteTodoStore(request.getfixturevalue("db"), "alice")


async def _new_list(store: TodoStore, title: str, *todos: tuple[str, bool]) -> int:
    await store.add_list(title)
    todo_list = next(tl for tl in await store.sorted_todo_lists() if tl.title == title)
    for todo_title, done in todos:
        await store.create_todo(todo_list.id, todo_title)
        if done:
            created = next(
                t
                for t in (await store.load_todo_list(todo_list.id)).todos
                if t.title == todo_title
            )
            await store.mark_done(todo_list.id, created.id)
    return todo_list.id


def test_is_a_todo_store(store):
    assert isinstance(store, TodoStore)


@pytest.mark.asyncio
async def test_sorted_todo_lists_partition_and_order(store):
    await _new_list(store, "zeta", ("a", False))
    await _new_list(store, "Alpha", ("b", True))
    await _new_list(store, "beta")
    await _new_list(store, "Gamma", ("c", True), ("d", True))

    lists = await store.sorted_todo_lists()
    done_flags = [store.is_done_todo_list(tl) for tl in lists]
    assert done_flags == sorted(done_flags)

    undone = [tl.title.lower() for tl in lists if not store.is_done_todo_list(tl)]
    done = [tl.title.lower() for tl in lists if store.is_done_todo_list(tl)]
    assert undone == ["beta", "zeta"]
    assert done == ["alpha", "gamma"]


@pytest.mark.asyncio
async def test_list_without_todos_is_never_done(store):
    list_id = await _new_list(store, "Empty")
    await store.mark_all_done(list_id)
    assert store.is_done_todo_list(await store.load_todo_list(list_id)) is False


@pytest.mark.asyncio
async def test_sorted_todos_order(store):
    list_id = await _new_list(
        store, "L", ("walk dog", True), ("Buy milk", False), ("answer mail", True), ("call mom", False)
    )
    todos = await store.sorted_todos(await store.load_todo_list(list_id))
    assert [t.title for t in todos] == ["Buy milk", "call mom", "answer mail", "walk dog"]


@pytest.mark.asyncio
async def test_create_then_load(store):
    list_id = await _new_list(store, "L")
    assert await store.create_todo(list_id, "Eggs") is True
    (eggs,) = (await store.load_todo_list(list_id)).todos
    loaded = await store.load_todo(list_id, eggs.id)
    assert loaded.title == "Eggs"
    assert loaded.done is False


@pytest.mark.asyncio
async def test_done_flag_operations(store):
    list_id = await _new_list(store, "L", ("Milk", False))
    (milk,) = (await store.load_todo_list(list_id)).todos

    assert await store.mark_done(list_id, milk.id) is True
    assert await store.mark_done(list_id, milk.id) is True
    assert (await store.load_todo(list_id, milk.id)).done is True

    assert await store.toggle_done_todo(list_id, milk.id) is True
    assert (await store.load_todo(list_id, milk.id)).done is False

    assert await store.mark_undone(list_id, milk.id) is True
    assert (await store.load_todo(list_id, milk.id)).done is False

    assert await store.toggle_done_todo(list_id, milk.id + 1000) is False


@pytest.mark.asyncio
async def test_mark_all_done_reports_list_existence(store):
    list_id = await _new_list(store, "L", ("a", True), ("b", False), ("c", False))
    assert await store.mark_all_done(list_id) is True
    assert all(t.done for t in (await store.load_todo_list(list_id)).todos)
    assert await store.mark_all_done(list_id + 1000) is False


@pytest.mark.asyncio
async def test_unique_list_title(store):
    await _new_list(store, "Groceries")
    assert await store.unique_list_title("Groceries") is False
    assert await store.unique_list_title("GROCERIES") is True
    assert await store.unique_list_title("Chores") is True


@pytest.mark.asyncio
async def test_delete_list_removes_its_todos(store):
    list_id = await _new_list(store, "L", ("a", False), ("b", True))
    todo_ids = [t.id for t in (await store.load_todo_list(list_id)).todos]
    assert await store.delete_todo_list(list_id) is True
    for todo_id in todo_ids:
        assert await store.load_todo(list_id, todo_id) is None
    assert await store.load_todo_list(list_id) is None
    assert await store.delete_todo_list(list_id) is False


@pytest.mark.asyncio
async def test_delete_todo(store):
    list_id = await _new_list(store, "L", ("a", False))
    (todo,) = (await store.load_todo_list(list_id)).todos
    assert await store.delete_todo(list_id, todo.id) is True
    assert await store.delete_todo(list_id, todo.id) is False


@pytest.mark.asyncio
async def test_rename(store):
    list_id = await _new_list(store, "Old")
    assert await store.set_list_title(list_id, "New") is True
    assert (await store.load_todo_list(list_id)).title == "New"
    assert await store.set_list_title(list_id + 1000, "Nope") is False


@pytest.mark.asyncio
async def test_unknown_user_is_not_authenticated(store):
    assert await store.existing_user("mallory", "secret") is False


@pytest.mark.asyncio
async def test_groceries_scenario(store):
    list_id = await _new_list(store, "Groceries", ("Milk", False))
    (milk,) = (await store.load_todo_list(list_id)).todos

    assert await store.toggle_done_todo(list_id, milk.id) is True
    assert (await store.load_todo(list_id, milk.id)).done is True
    assert store.is_done_todo_list(await store.load_todo_list(list_id)) is True

    assert await store.create_todo(list_id, "Eggs") is True
    todo_list = await store.load_todo_list(list_id)
    assert store.is_done_todo_list(todo_list) is False
    assert len(todo_list.todos) == 2
