"""Signage API client - Media Repository and Group Directory endpoints."""

import mimetypes
from pathlib import Path
from typing import Iterable, Optional

import httpx
from pydantic import ValidationError

from signage_admin.config.constants import (
    GROUP_ENDPOINT,
    LOGIN_ENDPOINT,
    MEDIA_ENDPOINT,
    MEDIA_UPLOAD_ENDPOINT,
    UPLOAD_FILE_FIELD,
    UPLOAD_GROUP_IDS_FIELD,
    UPLOAD_NAME_FIELD,
)
from signage_admin.config.settings import settings
from signage_admin.exceptions import (
    APIValidationError,
    AuthenticationError,
    CapacityError,
    SignageAPIError,
    TransportError,
)
from signage_admin.models.media_item import Group, MediaItem
from signage_admin.models.outcome import Operation, ResponseCategory
from signage_admin.services.core.response_classifier import ResponseClassifier
from signage_admin.services.integrations.credentials import CredentialProvider
from signage_admin.utils.logger import logger


class SignageAPIClient:
    """
    Thin async client for the signage backend.

    Read operations (login, list_groups, list_media) parse the body and raise
    SignageAPIError subclasses on failure. Mutations (create, update, upload,
    delete) return the raw httpx.Response so the caller can classify it;
    transport failures (httpx.RequestError) propagate from mutations.

    Every request except login carries the bearer token from the injected
    CredentialProvider.

    Usage:
        client = SignageAPIClient(credentials)
        groups = await client.list_groups()
        response = await client.upload_media("/videos/promo.mp4", ["g1", "g2"])
    """

    ERROR_TYPES = {
        ResponseCategory.VALIDATION_ERROR: APIValidationError,
        ResponseCategory.AUTH_ERROR: AuthenticationError,
        ResponseCategory.CAPACITY_ERROR: CapacityError,
    }

    def __init__(
        self,
        credentials: CredentialProvider,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        classifier: Optional[ResponseClassifier] = None,
    ):
        self.credentials = credentials
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT_SECONDS
        self.classifier = classifier or ResponseClassifier()

    def url_for(self, path: str) -> str:
        clean_path = path[1:] if path.startswith("/") else path
        return f"{self.base_url}/{clean_path}"

    # ==================== Auth ====================

    async def login(self, username: str, password: str) -> str:
        """
        Exchange admin credentials for a bearer token.

        Returns:
            The access token issued by the auth endpoint

        Raises:
            AuthenticationError: Credentials refused or no token returned
            TransportError: Endpoint unreachable
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.url_for(LOGIN_ENDPOINT),
                    json={"username": username, "password": password},
                    timeout=self.timeout,
                )
        except httpx.RequestError as e:
            logger.error(f"Network error during login: {e}")
            raise TransportError(f"Network error: {e}")

        if not 200 <= response.status_code < 300:
            message = self._safe_message(response) or "Login failed"
            raise AuthenticationError(message, status_code=response.status_code)

        data = self._safe_json(response)
        token = data.get("accessToken") if isinstance(data, dict) else None
        if not token:
            raise AuthenticationError("No access token in login response")

        return token

    # ==================== Reads ====================

    async def list_groups(self) -> list[Group]:
        data = await self._get_list(GROUP_ENDPOINT)
        try:
            return [Group.model_validate(record) for record in data]
        except ValidationError as e:
            raise SignageAPIError(f"Malformed group record: {e}")

    async def list_media(self) -> list[MediaItem]:
        data = await self._get_list(MEDIA_ENDPOINT)
        try:
            return [MediaItem.model_validate(record) for record in data]
        except ValidationError as e:
            raise SignageAPIError(f"Malformed media record: {e}")

    async def _get_list(self, path: str) -> list:
        headers = self.credentials.authorization_header()

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.url_for(path), headers=headers, timeout=self.timeout
                )
        except httpx.RequestError as e:
            logger.error(f"Network error fetching {path}: {e}")
            raise TransportError(f"Network error: {e}")

        self._raise_for_error(response, Operation.LIST)

        data = self._safe_json(response)
        if not isinstance(data, list):
            raise SignageAPIError(
                f"Expected a list from {path}", status_code=response.status_code
            )
        return data

    # ==================== Mutations ====================

    async def create_media(self, payload: dict) -> httpx.Response:
        """POST a URL-reference media record."""
        headers = self.credentials.authorization_header()
        async with httpx.AsyncClient() as client:
            return await client.post(
                self.url_for(MEDIA_ENDPOINT),
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )

    async def update_media(self, media_id: str, payload: dict) -> httpx.Response:
        """PATCH an existing media record."""
        headers = self.credentials.authorization_header()
        async with httpx.AsyncClient() as client:
            return await client.patch(
                self.url_for(f"{MEDIA_ENDPOINT}/{media_id}"),
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )

    async def upload_media(
        self,
        file_path: str,
        group_ids: Iterable[str],
        name: Optional[str] = None,
    ) -> httpx.Response:
        """
        Send a file to the upload-intake endpoint.

        Each group id is sent as a separate ``groupIds[]`` field. The file is
        streamed from its handle rather than read into memory up front.
        """
        headers = self.credentials.authorization_header()
        path = Path(file_path)
        content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"

        data = {UPLOAD_GROUP_IDS_FIELD: list(group_ids)}
        if name:
            data[UPLOAD_NAME_FIELD] = name

        with path.open("rb") as file_handle:
            async with httpx.AsyncClient() as client:
                return await client.post(
                    self.url_for(MEDIA_UPLOAD_ENDPOINT),
                    data=data,
                    files={UPLOAD_FILE_FIELD: (path.name, file_handle, content_type)},
                    headers=headers,
                    timeout=self.timeout,
                )

    async def delete_media(self, media_id: str) -> httpx.Response:
        headers = self.credentials.authorization_header()
        async with httpx.AsyncClient() as client:
            return await client.delete(
                self.url_for(f"{MEDIA_ENDPOINT}/{media_id}"),
                headers=headers,
                timeout=self.timeout,
            )

    # ==================== Helpers ====================

    def _raise_for_error(self, response: httpx.Response, operation: Operation) -> None:
        """Raise the matching SignageAPIError for a non-2xx response."""
        if 200 <= response.status_code < 300:
            return

        result = self.classifier.classify_response(response, operation)
        error_type = self.ERROR_TYPES.get(result.category, SignageAPIError)

        kwargs = {"status_code": response.status_code, "category": result.category.value}
        if result.capacity_kind is not None:
            kwargs["capacity_kind"] = result.capacity_kind.value

        raise error_type(result.message, **kwargs)

    @staticmethod
    def _safe_json(response: httpx.Response):
        try:
            return response.json()
        except ValueError:
            return None

    def _safe_message(self, response: httpx.Response) -> Optional[str]:
        return self.classifier.extract_message(self._safe_json(response))
