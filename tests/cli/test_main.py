"""Tests for the CLI entry point."""

import pytest
from click.testing import CliRunner

from cli.main import cli
from signage_admin import __version__


@pytest.mark.unit
class TestCliGroup:
    """Tests for command registration."""

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_commands_registered(self):
        assert set(cli.commands) == {
            "login",
            "logout",
            "list-groups",
            "list-media",
            "add-media",
            "edit-media",
            "delete-media",
            "check-health",
        }
