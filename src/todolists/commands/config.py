"""Configuration management commands."""

import typer

from todolists.services.context_manager import get_context_manager
from todolists.utils.typer_helpers import SuggestingGroup
from todolists.utils.ui.formatters import format_config, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management")


@app.command("show")
@command_wrapper(auth_required=False)
def show_config() -> None:
    """Show the current configuration."""
    config_service = get_context_manager().config_service
    format_config(config_service.config.model_dump(), config_service.config_path)


@app.command("set")
@command_wrapper(auth_required=False)
def set_config(
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a configuration value."""
    manager = get_context_manager()
    try:
        manager.config_service.set_value(key, value)
    except ValueError as e:
        raise AppError(str(e)) from e
    manager.reset()
    format_success(f"{key} set to {value}")


@app.command("reset")
@command_wrapper(auth_required=False)
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset the configuration to defaults."""
    if not yes and not typer.confirm("Reset configuration to defaults?"):
        raise typer.Exit(0)
    manager = get_context_manager()
    manager.config_service.reset_config()
    manager.reset()
    format_success("Configuration reset.")
