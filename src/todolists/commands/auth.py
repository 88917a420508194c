"""Authentication commands."""

import typer

from todolists.services.auth_service import AuthService
from todolists.services.context_manager import get_context_manager
from todolists.utils.typer_helpers import SuggestingGroup
from todolists.utils.ui.formatters import format_info, format_warning

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Authentication commands")


def _auth_service() -> AuthService:
    manager = get_context_manager()
    return AuthService(manager.get_strategy_context().todo_store, manager.session)


@app.command("signin")
@command_wrapper(auth_required=False)
async def signin(
    username: str = typer.Argument(..., help="Username"),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, help="Password"
    ),
) -> None:
    """Sign in to the SQLite backend."""
    await _auth_service().sign_in(username, password)
    # The store is scoped to the session user; rebuild it for the new one.
    get_context_manager().reset()
    format_info("Welcome!")


@app.command("signout")
@command_wrapper(auth_required=False)
def signout() -> None:
    """Sign out of the current session."""
    _auth_service().sign_out()
    get_context_manager().reset()
    format_info("Signed out.")


@app.command("whoami")
@command_wrapper(auth_required=False)
def whoami() -> None:
    """Show the signed-in user."""
    session = get_context_manager().session
    if AuthService.is_authenticated(session):
        format_info(f"Signed in as {session['username']}")
    else:
        format_warning("Not signed in.")
