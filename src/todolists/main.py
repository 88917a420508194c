"""Main entry point for the todolists CLI."""

import typer

from todolists import __version__
from todolists.commands import auth, config, lists, todos, users
from todolists.utils.typer_helpers import SuggestingGroup
from todolists.utils.ui.formatters import console

app = typer.Typer(
    name="todolists",
    cls=SuggestingGroup,
    help="Manage todo lists from the command line",
    no_args_is_help=True,
)

app.add_typer(auth.app, name="auth", help="Authentication commands")
app.add_typer(lists.app, name="lists", help="Todo list management commands")
app.add_typer(todos.app, name="todos", help="Todo management commands")
app.add_typer(users.app, name="users", help="User administration (sqlite only)")
app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]todolists[/bold] version [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
