"""Tests for media CLI commands."""

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from cli.commands import media
from cli.commands.media import add_media, delete_media, edit_media, list_media
from cli.shell import RichShell
from signage_admin.exceptions import AuthenticationError
from signage_admin.models.media_item import Group, MediaItem
from signage_admin.models.media_status import MediaStatus
from signage_admin.services.factory import create_console
from signage_admin.services.integrations.credentials import CredentialProvider


@pytest.fixture
def services():
    """Console services with a logged-in credential and a mocked API client."""
    credentials = CredentialProvider()
    credentials.acquire("tok-123")
    console_services = create_console(
        shell_factory=lambda library: RichShell(library, media.console),
        credentials=credentials,
    )
    client = console_services.client
    client.list_groups = AsyncMock(return_value=[Group(id="g1", name="Lobby")])
    client.list_media = AsyncMock(return_value=[])
    client.create_media = AsyncMock()
    client.update_media = AsyncMock()
    client.upload_media = AsyncMock()
    client.delete_media = AsyncMock()
    return console_services


@pytest.fixture
def patched_services(services):
    with patch("cli.commands.media._console_services", return_value=services):
        yield services


@pytest.fixture
def ready_item(sample_media_record):
    return MediaItem.model_validate(sample_media_record)


@pytest.mark.unit
class TestListMediaCommand:
    """Tests for the list-media CLI command."""

    def test_list_media_shows_items(self, patched_services, ready_item):
        patched_services.client.list_media.return_value = [ready_item]

        result = CliRunner().invoke(list_media, [])

        assert result.exit_code == 0
        assert "m1" in result.output
        assert "Ready: 1" in result.output

    def test_list_media_empty(self, patched_services):
        result = CliRunner().invoke(list_media, [])

        assert result.exit_code == 0
        assert "No media found" in result.output

    def test_list_media_api_error(self, patched_services):
        patched_services.client.list_media.side_effect = AuthenticationError(status_code=401)

        result = CliRunner().invoke(list_media, [])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_list_media_watch_reports_status_change(self, patched_services, ready_item):
        pending = ready_item.model_copy(update={"status": MediaStatus.PENDING})
        patched_services.client.list_media.side_effect = [[pending], [ready_item]]

        result = CliRunner().invoke(list_media, ["--watch", "0.01", "--max-refreshes", "1"])

        assert result.exit_code == 0
        assert "Pending → " in result.output
        assert patched_services.client.list_media.await_count == 2


@pytest.mark.unit
class TestAddMediaCommand:
    """Tests for the add-media CLI command."""

    def test_add_url_media(self, patched_services, make_response):
        patched_services.client.create_media.return_value = make_response(201, {"id": "m9"})

        result = CliRunner().invoke(
            add_media, ["--url", "https://x/v.mp4", "-g", "g1", "--name", "Promo"]
        )

        assert result.exit_code == 0
        assert "Media created" in result.output
        patched_services.client.create_media.assert_awaited_once_with(
            {"groupIds": ["g1"], "url": "https://x/v.mp4", "name": "Promo"}
        )
        patched_services.client.list_media.assert_awaited_once()

    def test_upload_file(self, patched_services, make_response, tmp_path):
        video = tmp_path / "promo.mp4"
        video.write_bytes(b"video")
        patched_services.client.upload_media.return_value = make_response(202)

        result = CliRunner().invoke(add_media, ["--file", str(video), "-g", "g2", "-g", "g1"])

        assert result.exit_code == 0
        assert "File accepted" in result.output
        patched_services.client.upload_media.assert_awaited_once_with(
            str(video), ("g1", "g2"), None
        )

    def test_repeated_group_is_not_toggled_off(self, patched_services, make_response):
        patched_services.client.create_media.return_value = make_response(201, {"id": "m9"})

        CliRunner().invoke(add_media, ["--url", "https://x/v.mp4", "-g", "g1", "-g", "g1"])

        payload = patched_services.client.create_media.await_args.args[0]
        assert payload["groupIds"] == ["g1"]

    def test_missing_group_rejected_locally(self, patched_services):
        result = CliRunner().invoke(add_media, ["--url", "https://x/v.mp4"])

        assert result.exit_code == 1
        assert "at least one group required" in result.output
        patched_services.client.create_media.assert_not_called()

    def test_file_and_url_are_exclusive(self):
        result = CliRunner().invoke(add_media, ["--file", "a.mp4", "--url", "https://x/v.mp4"])

        assert result.exit_code == 2
        assert "not both" in result.output

    def test_server_validation_error(self, patched_services, make_response):
        patched_services.client.create_media.return_value = make_response(
            400, {"message": ["url must be a URL"]}
        )

        result = CliRunner().invoke(add_media, ["--url", "bad", "-g", "g1"])

        assert result.exit_code == 1
        assert "url must be a URL" in result.output
        patched_services.client.list_media.assert_not_called()


@pytest.mark.unit
class TestEditMediaCommand:
    """Tests for the edit-media CLI command."""

    def test_toggle_group_off(self, patched_services, ready_item, make_response):
        patched_services.client.list_media.return_value = [ready_item]
        patched_services.client.update_media.return_value = make_response(200, {"id": "m1"})

        result = CliRunner().invoke(edit_media, ["m1", "-t", "g2"])

        assert result.exit_code == 0
        assert "Media updated" in result.output
        media_id, payload = patched_services.client.update_media.await_args.args
        assert media_id == "m1"
        assert payload == {
            "groupIds": ["g1"],
            "url": "https://cdn.example.com/m1.mp4",
            "name": "Lobby loop",
        }
        assert patched_services.client.list_media.await_count == 2

    def test_replace_groups_and_url(self, patched_services, ready_item, make_response):
        patched_services.client.list_media.return_value = [ready_item]
        patched_services.client.update_media.return_value = make_response(200, {"id": "m1"})

        CliRunner().invoke(edit_media, ["m1", "-g", "g3", "--url", "https://x/new.mp4"])

        _, payload = patched_services.client.update_media.await_args.args
        assert payload["groupIds"] == ["g3"]
        assert payload["url"] == "https://x/new.mp4"

    def test_unchecking_last_group_rejected(self, patched_services, ready_item):
        patched_services.client.list_media.return_value = [ready_item]

        result = CliRunner().invoke(edit_media, ["m1", "-t", "g1", "-t", "g2"])

        assert result.exit_code == 1
        assert "at least one group required" in result.output
        patched_services.client.update_media.assert_not_called()

    def test_unknown_media(self, patched_services):
        result = CliRunner().invoke(edit_media, ["missing"])

        assert result.exit_code == 1
        assert "Media not found: missing" in result.output


@pytest.mark.unit
class TestDeleteMediaCommand:
    """Tests for the delete-media CLI command."""

    def test_delete_with_yes(self, patched_services, make_response):
        patched_services.client.delete_media.return_value = make_response(200)

        result = CliRunner().invoke(delete_media, ["m1", "--yes"])

        assert result.exit_code == 0
        assert "Media deleted" in result.output
        patched_services.client.delete_media.assert_awaited_once_with("m1")

    def test_delete_cancelled(self, patched_services):
        result = CliRunner().invoke(delete_media, ["m1"], input="n\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.output
        patched_services.client.delete_media.assert_not_called()

    def test_delete_failure(self, patched_services, make_response):
        patched_services.client.delete_media.return_value = make_response(
            404, {"message": "Media not found"}
        )

        result = CliRunner().invoke(delete_media, ["m1", "--yes"])

        assert result.exit_code == 1
        assert "Media not found" in result.output
