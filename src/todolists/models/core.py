"""Todo list data models."""

from pydantic import BaseModel, Field


class Todo(BaseModel):
    """Todo model representing a single item of a todo list.

    Attributes:
        id: Identifier, unique within the owning list
        title: Todo title
        done: Whether the todo has been completed
        todolist_id: Owning list (set by the SQLite store, None in memory)
    """

    id: int
    title: str
    done: bool = False
    todolist_id: int | None = None


class TodoList(BaseModel):
    """Todo list model owned by exactly one user.

    Attributes:
        id: Identifier, unique per user
        title: List title, unique per user
        todos: Ordered todos of the list
    """

    id: int
    title: str
    todos: list[Todo] = Field(default_factory=list)


class User(BaseModel):
    """User model. Only ever verified, never mutated by the stores."""

    username: str
    password_hash: str
