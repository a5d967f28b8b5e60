"""Create/edit dialog session and the submission it assembles."""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from signage_admin.config.settings import settings
from signage_admin.exceptions import SessionStateError
from signage_admin.models.media_item import MediaItem
from signage_admin.services.core.group_assignment import GroupAssignment
from signage_admin.utils.logger import logger


class IngestionMode(str, Enum):
    UPLOAD = "UPLOAD"
    URL_REFERENCE = "URL_REFERENCE"


# Request variants. Upload is create-only, so there is no UploadEdit.


@dataclass(frozen=True)
class UploadCreation:
    group_ids: tuple[str, ...]
    file_path: str
    name: Optional[str] = None


@dataclass(frozen=True)
class UrlCreation:
    group_ids: tuple[str, ...]
    url: str
    name: Optional[str] = None


@dataclass(frozen=True)
class UrlEdit:
    media_id: str
    group_ids: tuple[str, ...]
    url: str
    name: Optional[str] = None


MediaRequest = Union[UploadCreation, UrlCreation, UrlEdit]


class PendingSubmission:
    """
    Form state of the active dialog. Never persisted.

    Attributes:
        assignment: Groups checked so far
        name: Optional display label (blank means none)
        url: Remote URL for URL_REFERENCE mode
        file_path: Local file for UPLOAD mode
        editing_id: Set when the dialog edits an existing item
    """

    def __init__(
        self,
        mode: IngestionMode = IngestionMode.UPLOAD,
        editing_id: Optional[str] = None,
    ):
        if editing_id and mode != IngestionMode.URL_REFERENCE:
            raise SessionStateError("Existing media can only be edited by URL")

        self._mode = mode
        self.editing_id = editing_id
        self.assignment = GroupAssignment()
        self.name = ""
        self.url = ""
        self.file_path: Optional[str] = None

    @classmethod
    def for_edit(cls, item: MediaItem) -> "PendingSubmission":
        submission = cls(mode=IngestionMode.URL_REFERENCE, editing_id=item.id)
        submission.assignment.initialize_from(item)
        submission.name = item.name or ""
        submission.url = item.url or ""
        return submission

    @property
    def mode(self) -> IngestionMode:
        return self._mode

    @mode.setter
    def mode(self, value: IngestionMode) -> None:
        value = IngestionMode(value)
        if self.editing_id and value != IngestionMode.URL_REFERENCE:
            raise SessionStateError("Existing media can only be edited by URL")
        self._mode = value

    @property
    def is_edit(self) -> bool:
        return self.editing_id is not None

    @property
    def clean_name(self) -> Optional[str]:
        name = (self.name or "").strip()
        return name or None

    def to_request(self) -> MediaRequest:
        """Freeze the form into the request variant it describes.

        Callers validate first; this does not check for missing fields.
        """
        group_ids = tuple(self.assignment.group_ids)

        if self.is_edit:
            return UrlEdit(
                media_id=self.editing_id,
                group_ids=group_ids,
                url=self.url.strip(),
                name=self.clean_name,
            )

        if self._mode == IngestionMode.UPLOAD:
            return UploadCreation(
                group_ids=group_ids,
                file_path=self.file_path,
                name=self.clean_name,
            )

        return UrlCreation(group_ids=group_ids, url=self.url.strip(), name=self.clean_name)


class MediaSession:
    """
    The single create/edit dialog of a console instance.

    Only one session is open at a time. Closing schedules the pending
    submission to be discarded after ``reset_delay`` seconds (a presentation
    delay); reopening discards it immediately, so a new session always starts
    from a clean form.
    """

    def __init__(self, reset_delay: Optional[float] = None):
        if reset_delay is None:
            reset_delay = settings.SESSION_RESET_DELAY_SECONDS
        self.reset_delay = reset_delay
        self.submission: Optional[PendingSubmission] = None
        self.is_open = False
        self._reset_handle: Optional[asyncio.TimerHandle] = None

    def open_create(self) -> PendingSubmission:
        self._begin()
        self.submission = PendingSubmission(mode=IngestionMode.UPLOAD)
        return self.submission

    def open_edit(self, item: MediaItem) -> PendingSubmission:
        self._begin()
        self.submission = PendingSubmission.for_edit(item)
        return self.submission

    def close(self) -> None:
        """Close the dialog; the form is discarded once the delay elapses."""
        self.is_open = False

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is None or self.reset_delay <= 0:
            self.discard()
            return

        self._cancel_pending_reset()
        self._reset_handle = loop.call_later(self.reset_delay, self.discard)

    def discard(self) -> None:
        self._cancel_pending_reset()
        self.submission = None

    def _begin(self) -> None:
        if self.is_open:
            raise SessionStateError("A media dialog is already open")

        self.discard()
        self.is_open = True
        logger.debug("Media session opened")

    def _cancel_pending_reset(self) -> None:
        if self._reset_handle is not None:
            self._reset_handle.cancel()
            self._reset_handle = None
