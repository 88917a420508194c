"""Todo list commands."""

import typer

from todolists.utils.typer_helpers import SuggestingGroup
from todolists.utils.ui.formatters import (
    format_success,
    format_todo_list,
    format_todo_lists,
)

from .decorators import command_wrapper
from .utils import get_todo_service, parse_id

app = typer.Typer(cls=SuggestingGroup, help="Todo list management commands")


@app.command("all")
@command_wrapper
async def list_todo_lists() -> None:
    """Show all todo lists, unfinished lists first."""
    service = get_todo_service()
    format_todo_lists(await service.list_todo_lists())


@app.command("show")
@command_wrapper
async def show_todo_list(
    todo_list_id: str = typer.Argument(..., help="Todo list ID"),
) -> None:
    """Show a todo list and its todos."""
    service = get_todo_service()
    format_todo_list(await service.get_todo_list(parse_id(todo_list_id)))


@app.command("new")
@command_wrapper
async def create_todo_list(
    title: str = typer.Argument(..., help="Title of the new list"),
) -> None:
    """Create a new todo list."""
    service = get_todo_service()
    await service.create_todo_list(title)
    format_success("The todo list has been created.")


@app.command("rename")
@command_wrapper
async def rename_todo_list(
    todo_list_id: str = typer.Argument(..., help="Todo list ID"),
    title: str = typer.Argument(..., help="New title"),
) -> None:
    """Change the title of a todo list."""
    service = get_todo_service()
    await service.rename_todo_list(parse_id(todo_list_id), title)
    format_success("Todo list updated.")


@app.command("delete")
@command_wrapper
async def delete_todo_list(
    todo_list_id: str = typer.Argument(..., help="Todo list ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Delete a todo list and all of its todos."""
    list_id = parse_id(todo_list_id)
    if not force and not typer.confirm(f"Delete todo list {list_id}?"):
        raise typer.Exit(0)
    service = get_todo_service()
    await service.delete_todo_list(list_id)
    format_success("Todo list deleted.")


@app.command("complete-all")
@command_wrapper
async def complete_all(
    todo_list_id: str = typer.Argument(..., help="Todo list ID"),
) -> None:
    """Mark every todo of a list as done."""
    service = get_todo_service()
    await service.complete_all(parse_id(todo_list_id))
    format_success("All todos have been marked as done.")
