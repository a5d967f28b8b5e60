"""Media ingestion service - submit new or edited media to the repository."""
from pathlib import Path
from typing import Optional

import httpx

from signage_admin.exceptions import NotAuthenticatedError, SignageAPIError
from signage_admin.models.outcome import (
    ClassifiedResponse,
    Operation,
    ValidationOutcome,
)
from signage_admin.services.base_service import BaseService
from signage_admin.services.core.media_library import MediaLibrary
from signage_admin.services.core.media_session import (
    IngestionMode,
    MediaRequest,
    MediaSession,
    PendingSubmission,
    UploadCreation,
    UrlCreation,
    UrlEdit,
)
from signage_admin.services.core.presentation import Outcome, PresentationShell
from signage_admin.services.core.response_classifier import ResponseClassifier
from signage_admin.services.integrations.signage_api import SignageAPIClient
from signage_admin.utils.logger import logger


class MediaIngestionService(BaseService):
    """
    Orchestrate a media submission from form state to operator feedback.

    Flow:
    1. Pre-flight validation (no request on failure)
    2. Freeze the form into an upload, URL-create or URL-edit request
    3. Send it and classify the response
    4. On success: close the dialog and re-fetch the whole media list

    Nothing is retried. Processing of uploads happens out of band, so the
    new item's real status is only learned from the re-fetched list.

    Usage:
        service = MediaIngestionService(client, library, session, shell)
        submission = session.open_create()
        submission.assignment.toggle("g1")
        submission.file_path = "/videos/promo.mp4"
        outcome = await service.submit(submission)
    """

    GROUPS_REQUIRED = "at least one group required"
    FILE_REQUIRED = "file required"
    URL_REQUIRED = "URL required"

    def __init__(
        self,
        client: SignageAPIClient,
        library: MediaLibrary,
        session: Optional[MediaSession] = None,
        shell: Optional[PresentationShell] = None,
        classifier: Optional[ResponseClassifier] = None,
    ):
        super().__init__()
        self.client = client
        self.library = library
        self.session = session or MediaSession()
        self.shell = shell or PresentationShell()
        self.classifier = classifier or ResponseClassifier()

    def validate(self, submission: PendingSubmission) -> Optional[ValidationOutcome]:
        """Return a ValidationOutcome if the form cannot be sent as is."""
        if submission.assignment.is_empty():
            return ValidationOutcome(self.GROUPS_REQUIRED)

        if submission.is_edit or submission.mode == IngestionMode.URL_REFERENCE:
            if not (submission.url or "").strip():
                return ValidationOutcome(self.URL_REQUIRED)
            return None

        if not submission.file_path:
            return ValidationOutcome(self.FILE_REQUIRED)

        if not Path(submission.file_path).is_file():
            return ValidationOutcome(f"File not found: {submission.file_path}")

        return None

    async def submit(self, submission: PendingSubmission) -> Outcome:
        """
        Validate, send and classify one submission.

        Args:
            submission: Form state of the active dialog

        Returns:
            ValidationOutcome (nothing sent) or ClassifiedResponse
        """
        rejection = self.validate(submission)
        if rejection is not None:
            logger.info(f"Submission rejected before sending: {rejection.message}")
            self.shell.notify(rejection)
            return rejection

        request = submission.to_request()

        with self.track_execution(
            method_name="submit",
            input_params={
                "request": type(request).__name__,
                "groups": len(request.group_ids),
            },
        ):
            outcome = await self._send(request)

        self.shell.notify(outcome)
        if outcome.is_success:
            await self._finish_session()
        return outcome

    async def submit_current(self) -> Outcome:
        """Submit the form of the open session."""
        if self.session.submission is None:
            raise ValueError("No media dialog is open")
        return await self.submit(self.session.submission)

    async def delete(self, media_id: str) -> ClassifiedResponse:
        """Delete a media item and re-fetch the list on success."""
        with self.track_execution(method_name="delete", input_params={"media_id": media_id}):
            try:
                response = await self.client.delete_media(media_id)
                outcome = self.classifier.classify_response(response, Operation.DELETE)
            except NotAuthenticatedError:
                outcome = self.classifier.classify(401, None, Operation.DELETE)
            except httpx.RequestError as e:
                outcome = self.classifier.classify_transport_error(e, Operation.DELETE)

        self.shell.notify(outcome)
        if outcome.is_success:
            await self._refresh_list()
        return outcome

    async def _send(self, request: MediaRequest) -> Outcome:
        if isinstance(request, UploadCreation):
            operation = Operation.UPLOAD
        elif isinstance(request, UrlEdit):
            operation = Operation.UPDATE
        else:
            operation = Operation.CREATE

        try:
            response = await self._dispatch(request)
        except NotAuthenticatedError:
            return self.classifier.classify(401, None, operation)
        except httpx.RequestError as e:
            return self.classifier.classify_transport_error(e, operation)
        except OSError as e:
            logger.warning(f"Could not read upload file: {e}")
            return ValidationOutcome(f"Cannot read file: {e}")

        outcome = self.classifier.classify_response(response, operation)
        logger.info(
            f"{operation.value} answered HTTP {response.status_code}: {outcome.category.value}"
        )
        return outcome

    async def _dispatch(self, request: MediaRequest) -> httpx.Response:
        if isinstance(request, UploadCreation):
            return await self.client.upload_media(
                request.file_path, request.group_ids, request.name
            )

        payload = self.build_payload(request)
        if isinstance(request, UrlEdit):
            return await self.client.update_media(request.media_id, payload)
        return await self.client.create_media(payload)

    @staticmethod
    def build_payload(request: "UrlCreation | UrlEdit") -> dict:
        """
        JSON body for URL-reference create and update.

        ``groupIds`` is always present, even on an unchanged edit, so that
        unchecking every group but one is sent rather than read as "no change".
        """
        return {
            "groupIds": list(request.group_ids),
            "url": request.url,
            "name": request.name,
        }

    async def _finish_session(self) -> None:
        self.shell.close_session()
        if self.session.is_open:
            self.session.close()
        await self._refresh_list()

    async def _refresh_list(self) -> None:
        try:
            items = await self.library.refresh()
        except SignageAPIError as e:
            logger.warning(f"Media list refresh failed: {e}")
            self.shell.notify(self.classifier.classify_error(e, Operation.LIST))
            return
        self.shell.show_media(items)
