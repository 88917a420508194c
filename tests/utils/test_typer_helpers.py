"""Unit tests for SuggestingGroup (typer_helpers.py)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import click
import pytest
import typer

from todolists.utils.typer_helpers import SuggestingGroup

_PARENT = SuggestingGroup.__bases__[0]


def _group(*names: str) -> SuggestingGroup:
    group = SuggestingGroup(name="todolists")
    group.commands = {name: MagicMock() for name in names}
    return group


def _ctx():
    ctx = MagicMock()
    ctx.info_name = "todolists"
    return ctx


def test_valid_command_passes_through():
    group = _group("lists")
    with patch.object(_PARENT, "resolve_command", return_value=("lists", MagicMock(), [])):
        assert group.resolve_command(_ctx(), ["lists"])[0] == "lists"


def test_typo_reports_suggestions_and_exits_with_usage_code():
    group = _group("lists", "todos", "auth")
    with patch.object(_PARENT, "resolve_command", side_effect=click.UsageError("No such command")):
        with patch("todolists.utils.typer_helpers.format_command_suggestions") as mock_fmt:
            with pytest.raises(typer.Exit) as exc_info:
                group.resolve_command(_ctx(), ["lsts"])

    assert exc_info.value.exit_code == 2
    mock_fmt.assert_called_once_with("lsts", "todolists", ["lists"])


def test_several_close_matches_are_all_offered():
    group = _group("show", "shows", "shown")
    with patch.object(_PARENT, "resolve_command", side_effect=click.UsageError("No such command")):
        with patch("todolists.utils.typer_helpers.format_command_suggestions") as mock_fmt:
            with pytest.raises(typer.Exit):
                group.resolve_command(_ctx(), ["shw"])

    assert sorted(mock_fmt.call_args[0][2]) == ["show", "shown", "shows"]


def test_no_close_match_reraises_usage_error():
    group = _group("lists", "todos")
    with patch.object(_PARENT, "resolve_command", side_effect=click.UsageError("No such command")):
        with pytest.raises(click.UsageError):
            group.resolve_command(_ctx(), ["xyzabc"])


def test_empty_args_reraises():
    group = _group()
    with patch.object(_PARENT, "resolve_command", side_effect=click.UsageError("Missing command")):
        with pytest.raises(click.UsageError):
            group.resolve_command(_ctx(), [])


def test_other_errors_are_not_intercepted():
    group = _group("lists")
    with patch.object(_PARENT, "resolve_command", side_effect=RuntimeError("boom")):
        with pytest.raises(RuntimeError):
            group.resolve_command(_ctx(), ["lsts"])
