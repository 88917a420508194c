"""CLI tests for the config commands."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from todolists.main import app

runner = CliRunner()


class TestHelpFlags:
    def test_app_help(self):
        result = runner.invoke(app, ["config", "--help"])
        assert result.exit_code == 0

    def test_set_help(self):
        result = runner.invoke(app, ["config", "set", "--help"])
        assert result.exit_code == 0


def test_show_defaults(cli_env):
    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0
    assert "persistence" in result.output
    assert "memory" in result.output
    assert "title_max_length" in result.output
    assert "log_level" in result.output


def test_set_persists(cli_env):
    result = runner.invoke(app, ["config", "set", "persistence", "sqlite"])
    assert result.exit_code == 0
    assert "persistence set to sqlite" in result.output
    saved = json.loads((cli_env / "config.json").read_text())
    assert saved["persistence"] == "sqlite"


def test_set_unknown_key(cli_env):
    result = runner.invoke(app, ["config", "set", "colour", "red"])
    assert result.exit_code == 1
    assert "Unknown config key: colour" in result.output


def test_set_invalid_value(cli_env):
    result = runner.invoke(app, ["config", "set", "persistence", "redis"])
    assert result.exit_code == 1
    assert "Invalid value for persistence" in result.output


def test_reset(cli_env):
    runner.invoke(app, ["config", "set", "persistence", "sqlite"])
    result = runner.invoke(app, ["config", "reset", "--yes"])
    assert result.exit_code == 0
    assert "Configuration reset." in result.output
    saved = json.loads((cli_env / "config.json").read_text())
    assert saved["persistence"] == "memory"


def test_reset_declined(cli_env):
    runner.invoke(app, ["config", "set", "persistence", "sqlite"])
    result = runner.invoke(app, ["config", "reset"], input="n\n")
    assert result.exit_code == 0
    saved = json.loads((cli_env / "config.json").read_text())
    assert saved["persistence"] == "sqlite"
