"""Tests for MediaSession and PendingSubmission."""

import asyncio

import pytest

from signage_admin.exceptions import SessionStateError
from signage_admin.models.media_item import MediaItem
from signage_admin.services.core.media_session import (
    IngestionMode,
    MediaSession,
    PendingSubmission,
    UploadCreation,
    UrlCreation,
    UrlEdit,
)


@pytest.fixture
def ready_item(sample_media_record):
    return MediaItem.model_validate(sample_media_record)


@pytest.mark.unit
class TestPendingSubmission:
    """Tests for the form state and its request variants."""

    def test_defaults_to_upload_mode(self):
        submission = PendingSubmission()

        assert submission.mode == IngestionMode.UPLOAD
        assert submission.is_edit is False

    def test_for_edit_copies_item_and_forces_url_mode(self, ready_item):
        submission = PendingSubmission.for_edit(ready_item)

        assert submission.mode == IngestionMode.URL_REFERENCE
        assert submission.editing_id == "m1"
        assert submission.url == "https://cdn.example.com/m1.mp4"
        assert submission.name == "Lobby loop"
        assert submission.assignment.as_set() == {"g1", "g2"}

    def test_edit_cannot_switch_to_upload(self, ready_item):
        submission = PendingSubmission.for_edit(ready_item)

        with pytest.raises(SessionStateError):
            submission.mode = IngestionMode.UPLOAD

        assert submission.mode == IngestionMode.URL_REFERENCE

    def test_edit_via_upload_cannot_be_constructed(self):
        with pytest.raises(SessionStateError):
            PendingSubmission(mode=IngestionMode.UPLOAD, editing_id="m1")

    def test_create_can_switch_modes(self):
        submission = PendingSubmission()

        submission.mode = IngestionMode.URL_REFERENCE
        submission.mode = IngestionMode.UPLOAD

        assert submission.mode == IngestionMode.UPLOAD

    def test_to_request_upload(self):
        submission = PendingSubmission()
        submission.assignment.toggle("g2")
        submission.assignment.toggle("g1")
        submission.file_path = "/videos/promo.mp4"

        request = submission.to_request()

        assert request == UploadCreation(
            group_ids=("g1", "g2"), file_path="/videos/promo.mp4", name=None
        )

    def test_to_request_url_creation_strips_values(self):
        submission = PendingSubmission(mode=IngestionMode.URL_REFERENCE)
        submission.assignment.toggle("g1")
        submission.url = "  https://x/v.mp4 "
        submission.name = "  Promo  "

        request = submission.to_request()

        assert request == UrlCreation(group_ids=("g1",), url="https://x/v.mp4", name="Promo")

    def test_to_request_edit(self, ready_item):
        submission = PendingSubmission.for_edit(ready_item)
        submission.name = ""

        request = submission.to_request()

        assert isinstance(request, UrlEdit)
        assert request.media_id == "m1"
        assert request.group_ids == ("g1", "g2")
        assert request.name is None


@pytest.mark.unit
class TestMediaSession:
    """Tests for the single active dialog session."""

    def test_open_create(self):
        session = MediaSession(reset_delay=0)

        submission = session.open_create()

        assert session.is_open is True
        assert session.submission is submission
        assert submission.mode == IngestionMode.UPLOAD

    def test_open_edit(self, ready_item):
        session = MediaSession(reset_delay=0)

        submission = session.open_edit(ready_item)

        assert submission.editing_id == "m1"

    def test_second_open_is_rejected(self):
        session = MediaSession(reset_delay=0)
        session.open_create()

        with pytest.raises(SessionStateError):
            session.open_create()

    def test_close_without_loop_discards_immediately(self):
        session = MediaSession(reset_delay=5)
        session.open_create()

        session.close()

        assert session.is_open is False
        assert session.submission is None

    @pytest.mark.asyncio
    async def test_close_discards_after_delay(self):
        session = MediaSession(reset_delay=0.01)
        session.open_create()

        session.close()

        assert session.is_open is False
        assert session.submission is not None

        await asyncio.sleep(0.05)

        assert session.submission is None

    @pytest.mark.asyncio
    async def test_reopen_before_delay_starts_clean(self, ready_item):
        session = MediaSession(reset_delay=10)
        first = session.open_edit(ready_item)
        session.close()

        second = session.open_create()

        assert second is not first
        assert second.is_edit is False
        assert second.assignment.is_empty() is True

        await asyncio.sleep(0)
        assert session.submission is second

    @pytest.mark.asyncio
    async def test_cancelled_session_is_discarded(self):
        session = MediaSession(reset_delay=0)
        submission = session.open_create()
        submission.assignment.toggle("g1")

        session.close()

        assert session.submission is None
