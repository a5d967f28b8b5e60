"""Tests for health check CLI command."""

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from cli.commands.health import check_health


@pytest.mark.unit
class TestCheckHealthCommand:
    """Tests for the check-health CLI command."""

    @patch("cli.commands.health.create_console")
    def test_healthy(self, mock_create_console):
        services = mock_create_console.return_value
        services.health.check_all = AsyncMock(
            return_value={
                "status": "healthy",
                "checks": {
                    "config": {"healthy": True, "message": "Configuration OK"},
                    "api": {"healthy": True, "message": "API reachable"},
                },
                "timestamp": "2026-01-10T09:00:00",
            }
        )

        result = CliRunner().invoke(check_health, [])

        assert result.exit_code == 0
        assert "HEALTHY" in result.output
        assert "Configuration OK" in result.output

    @patch("cli.commands.health.create_console")
    def test_unhealthy(self, mock_create_console):
        services = mock_create_console.return_value
        services.health.check_all = AsyncMock(
            return_value={
                "status": "unhealthy",
                "checks": {"credentials": {"healthy": False, "message": "Not logged in"}},
                "timestamp": "2026-01-10T09:00:00",
            }
        )

        result = CliRunner().invoke(check_health, [])

        assert result.exit_code == 0
        assert "UNHEALTHY" in result.output
        assert "Not logged in" in result.output
