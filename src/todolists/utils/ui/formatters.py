"""Output formatters for todo lists and status messages.

Everything the CLI prints goes through the module-level ``console``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from todolists.models import TodoList
from todolists.utils.sorting import is_done_todo_list

console = Console()


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {escape(message)}")


def format_command_suggestions(
    attempted: str, group_name: str | None, suggestions: Sequence[str]
) -> None:
    """Report an unknown command together with the closest known ones."""
    console.print(
        f'[red]Error:[/red] unknown command "{escape(attempted)}" for "{group_name}"'
    )
    if len(suggestions) == 1:
        console.print("\n[yellow]Did you mean this?[/yellow]")
    else:
        console.print("\n[yellow]Did you mean one of these?[/yellow]")
    for suggestion in suggestions:
        console.print(f"        {suggestion}")


def format_config(values: Mapping[str, Any], config_path: Path) -> None:
    """Display configuration keys and the file they are stored in."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Key")
    table.add_column("Value")
    for key, value in values.items():
        table.add_row(key, "" if value is None else escape(str(value)))
    table.add_row("[dim]config file[/dim]", f"[dim]{escape(str(config_path))}[/dim]")
    console.print(table)


def todo_counts(todo_list: TodoList) -> tuple[int, int]:
    """Return (done, total) todo counts of a list."""
    done = sum(1 for todo in todo_list.todos if todo.done)
    return done, len(todo_list.todos)


def format_todo_lists(todo_lists: list[TodoList]) -> None:
    """Display an overview table of todo lists."""
    if not todo_lists:
        console.print("[dim]No todo lists yet.[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("ID", justify="right")
    table.add_column("Title")
    table.add_column("Progress", justify="right")

    for todo_list in todo_lists:
        done, total = todo_counts(todo_list)
        title = escape(todo_list.title)
        if is_done_todo_list(todo_list):
            title = f"[green strike]{title}[/green strike]"
        table.add_row(str(todo_list.id), title, f"{done}/{total}")

    console.print(table)


def format_todo_list(todo_list: TodoList) -> None:
    """Display a single todo list with its todos in their current order."""
    marker = " [green](done)[/green]" if is_done_todo_list(todo_list) else ""
    console.print(f"[bold]{escape(todo_list.title)}[/bold]{marker}")

    if not todo_list.todos:
        console.print("  [dim]There are no todos on this list.[/dim]")
        return

    for todo in todo_list.todos:
        check = "[green]✓[/green]" if todo.done else "[dim]○[/dim]"
        console.print(f"  {check} [cyan]{todo.id}[/cyan] {escape(todo.title)}")
