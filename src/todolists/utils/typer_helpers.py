"""Typer group that answers unknown commands with close matches."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from todolists.utils.ui.formatters import format_command_suggestions


class SuggestingGroup(TyperGroup):
    """Command group listing the closest known commands after a typo.

    Exits with click's usage-error code when it has something to suggest;
    otherwise click reports the error itself.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if not args:
                raise
            suggestions = get_close_matches(
                args[0], self.list_commands(ctx), n=3, cutoff=0.6
            )
            if not suggestions:
                raise
            format_command_suggestions(args[0], ctx.info_name, suggestions)
            raise typer.Exit(e.exit_code) from e
