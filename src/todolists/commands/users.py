"""User administration commands for the SQLite backend."""

import typer

from todolists.adapters.sqlite.connection import get_connection
from todolists.adapters.sqlite.user_manager import create_user
from todolists.services.context_manager import get_context_manager
from todolists.utils.typer_helpers import SuggestingGroup
from todolists.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="User administration (sqlite only)")


@app.command("add")
@command_wrapper(auth_required=False)
def add_user(
    username: str = typer.Argument(..., help="Username"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password",
    ),
) -> None:
    """Create a user in the SQLite database."""
    config_service = get_context_manager().config_service
    if config_service.config.persistence != "sqlite":
        raise AppError("Users can only be added with sqlite persistence.")
    try:
        user = create_user(get_connection(config_service.database_path), username, password)
    except ValueError as e:
        raise AppError(str(e)) from e
    format_success(f"User {user.username} created.")
