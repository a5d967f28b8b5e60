"""Tests for login/logout CLI commands."""

from unittest.mock import AsyncMock, Mock, patch

import pytest
from click.testing import CliRunner

from cli.commands.auth import login, logout
from signage_admin.exceptions import AuthenticationError, TransportError


@pytest.mark.unit
class TestLoginCommand:
    """Tests for the login CLI command."""

    @patch("cli.commands.auth.create_console")
    def test_login_success(self, mock_create_console):
        services = mock_create_console.return_value
        services.auth.login = AsyncMock()

        result = CliRunner().invoke(login, ["-u", "admin", "-p", "secret"])

        assert result.exit_code == 0
        assert "Logged in as admin" in result.output
        services.auth.login.assert_awaited_once_with("admin", "secret")

    @patch("cli.commands.auth.create_console")
    def test_login_prompts(self, mock_create_console):
        services = mock_create_console.return_value
        services.auth.login = AsyncMock()

        result = CliRunner().invoke(login, [], input="admin\nsecret\n")

        assert result.exit_code == 0
        services.auth.login.assert_awaited_once_with("admin", "secret")
        assert "secret" not in result.output

    @patch("cli.commands.auth.create_console")
    def test_login_refused(self, mock_create_console):
        services = mock_create_console.return_value
        services.auth.login = AsyncMock(
            side_effect=AuthenticationError("Invalid credentials", status_code=401)
        )

        result = CliRunner().invoke(login, ["-u", "admin", "-p", "wrong"])

        assert result.exit_code == 1
        assert "Login failed" in result.output
        assert "Invalid credentials" in result.output

    @patch("cli.commands.auth.create_console")
    def test_login_unreachable(self, mock_create_console):
        services = mock_create_console.return_value
        services.auth.login = AsyncMock(side_effect=TransportError())

        result = CliRunner().invoke(login, ["-u", "admin", "-p", "secret"])

        assert result.exit_code == 1
        assert "Could not reach the signage API" in result.output


@pytest.mark.unit
class TestLogoutCommand:
    """Tests for the logout CLI command."""

    @patch("cli.commands.auth.create_console")
    def test_logout(self, mock_create_console):
        services = Mock()
        mock_create_console.return_value = services

        result = CliRunner().invoke(logout, [])

        assert result.exit_code == 0
        assert "Logged out" in result.output
        services.auth.logout.assert_called_once()
