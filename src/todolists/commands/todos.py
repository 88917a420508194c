"""Todo commands."""

import typer

from todolists.utils.typer_helpers import SuggestingGroup
from todolists.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import get_todo_service, parse_id

app = typer.Typer(cls=SuggestingGroup, help="Todo management commands")


@app.command("add")
@command_wrapper
async def add_todo(
    todo_list_id: str = typer.Argument(..., help="Todo list ID"),
    title: str = typer.Argument(..., help="Title of the new todo"),
) -> None:
    """Add a todo to a list."""
    service = get_todo_service()
    await service.add_todo(parse_id(todo_list_id), title)
    format_success("The todo has been created.")


@app.command("toggle")
@command_wrapper
async def toggle_todo(
    todo_list_id: str = typer.Argument(..., help="Todo list ID"),
    todo_id: str = typer.Argument(..., help="Todo ID"),
) -> None:
    """Toggle the completion status of a todo."""
    service = get_todo_service()
    todo = await service.toggle_todo(parse_id(todo_list_id), parse_id(todo_id))
    if todo.done:
        format_success(f'"{todo.title}" marked done.')
    else:
        format_success(f'"{todo.title}" marked as NOT done!')


@app.command("delete")
@command_wrapper
async def delete_todo(
    todo_list_id: str = typer.Argument(..., help="Todo list ID"),
    todo_id: str = typer.Argument(..., help="Todo ID"),
) -> None:
    """Delete a todo."""
    service = get_todo_service()
    await service.delete_todo(parse_id(todo_list_id), parse_id(todo_id))
    format_success("The todo has been deleted.")
