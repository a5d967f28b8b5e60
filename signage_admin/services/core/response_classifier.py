"""Response classifier - map repository responses to operator feedback."""

import json
from typing import Any, Optional

import httpx

from signage_admin.config.constants import (
    MESSAGE_SEPARATOR,
    PENDING_VOLUME_NUMERAL,
    PENDING_VOLUME_TOKENS,
)
from signage_admin.exceptions import (
    AuthenticationError,
    SignageAPIError,
    TransportError,
)
from signage_admin.models.outcome import (
    CapacityKind,
    ClassifiedResponse,
    Operation,
    ResponseCategory,
)
from signage_admin.utils.logger import logger


class ResponseClassifier:
    """
    Turn an HTTP status and body into a titled, operator-facing outcome.

    Mapping:
        2xx (202)       -> ACCEPTED (upload queued for processing)
        2xx (other)     -> SUCCESS
        400             -> VALIDATION_ERROR
        401             -> AUTH_ERROR
        503             -> CAPACITY_ERROR (+ heuristic CapacityKind)
        other non-2xx   -> UNKNOWN_ERROR
        no response     -> TRANSPORT_ERROR

    Error bodies are expected to carry ``message`` as a string or a list of
    strings. Anything else (HTML error pages, empty bodies, bad JSON) falls
    back to a fixed message for the category; classification never raises.

    Usage:
        classifier = ResponseClassifier()
        result = classifier.classify(400, {"message": ["name required"]})
        result.category  # ResponseCategory.VALIDATION_ERROR
    """

    ACCEPTED_STATUS = 202

    SUCCESS_MESSAGES = {
        Operation.UPLOAD: "File queued for processing. It will be distributed once processing completes.",
        Operation.CREATE: "Media created",
        Operation.UPDATE: "Media updated",
        Operation.DELETE: "Media deleted",
        Operation.LIST: "Media list loaded",
    }

    FAILURE_MESSAGES = {
        Operation.UPLOAD: "Could not upload media",
        Operation.CREATE: "Could not create media",
        Operation.UPDATE: "Could not update media",
        Operation.DELETE: "Could not delete media",
        Operation.LIST: "Could not load media",
    }

    TRANSPORT_MESSAGES = {
        Operation.DELETE: "An error occurred while deleting media",
        Operation.LIST: "An error occurred while loading media",
    }
    DEFAULT_TRANSPORT_MESSAGE = "An error occurred while saving media"

    VALIDATION_FALLBACK = "Validation error"
    AUTH_MESSAGE = "Please log in again"
    CAPACITY_FALLBACK = "Service temporarily unavailable"
    GENERIC_FAILURE = "Request failed"

    CAPACITY_TITLES = {
        CapacityKind.PENDING_VOLUME_EXCEEDED: "Unprocessed files limit exceeded",
        CapacityKind.THROUGHPUT_LIMIT_EXCEEDED: "Processing limit exceeded",
    }

    def classify(
        self,
        http_status: int,
        body: Any = None,
        operation: Optional[Operation] = None,
    ) -> ClassifiedResponse:
        """
        Classify a repository response.

        Args:
            http_status: HTTP status code of the response
            body: Parsed JSON body, raw text/bytes, or None
            operation: Which operation produced the response (drives
                       success wording and generic fallbacks)

        Returns:
            ClassifiedResponse
        """
        if 200 <= http_status < 300:
            return self._classify_success(http_status, operation)

        message = self.extract_message(body)

        if http_status == 400:
            return ClassifiedResponse(
                category=ResponseCategory.VALIDATION_ERROR,
                title="Validation error",
                message=message or self.VALIDATION_FALLBACK,
                is_retryable_by_operator=True,
                status_code=http_status,
            )

        if http_status == 401:
            return ClassifiedResponse(
                category=ResponseCategory.AUTH_ERROR,
                title="Authorization error",
                message=self.AUTH_MESSAGE,
                is_retryable_by_operator=False,
                status_code=http_status,
            )

        if http_status == 503:
            kind = self.capacity_kind(message)
            return ClassifiedResponse(
                category=ResponseCategory.CAPACITY_ERROR,
                title=self.CAPACITY_TITLES[kind],
                message=message or self.CAPACITY_FALLBACK,
                is_retryable_by_operator=True,
                capacity_kind=kind,
                status_code=http_status,
            )

        return ClassifiedResponse(
            category=ResponseCategory.UNKNOWN_ERROR,
            title="Error",
            message=message or self.FAILURE_MESSAGES.get(operation, self.GENERIC_FAILURE),
            is_retryable_by_operator=True,
            status_code=http_status,
        )

    def classify_response(
        self, response: httpx.Response, operation: Optional[Operation] = None
    ) -> ClassifiedResponse:
        """Classify an httpx response, parsing its body defensively."""
        body = None
        if response.content:
            try:
                body = response.json()
            except ValueError:
                logger.debug(f"Non-JSON body on HTTP {response.status_code}")
        return self.classify(response.status_code, body, operation)

    def classify_transport_error(
        self, error: Exception, operation: Optional[Operation] = None
    ) -> ClassifiedResponse:
        """Outcome for a request that never got a response."""
        logger.error(f"Transport error during {getattr(operation, 'value', 'request')}: {error!r}")
        return ClassifiedResponse(
            category=ResponseCategory.TRANSPORT_ERROR,
            title="Error",
            message=self.TRANSPORT_MESSAGES.get(operation, self.DEFAULT_TRANSPORT_MESSAGE),
            is_retryable_by_operator=True,
        )

    def classify_error(
        self, error: SignageAPIError, operation: Optional[Operation] = None
    ) -> ClassifiedResponse:
        """Outcome for an error already raised by the API client."""
        if isinstance(error, TransportError):
            return self.classify_transport_error(error, operation)

        if isinstance(error, AuthenticationError):
            return self.classify(401, None, operation)

        message = error.args[0] if error.args else None
        return self.classify(error.status_code or 0, {"message": message}, operation)

    def _classify_success(
        self, http_status: int, operation: Optional[Operation]
    ) -> ClassifiedResponse:
        if http_status == self.ACCEPTED_STATUS:
            return ClassifiedResponse(
                category=ResponseCategory.ACCEPTED,
                title="File accepted",
                message=self.SUCCESS_MESSAGES[Operation.UPLOAD],
                is_retryable_by_operator=False,
                status_code=http_status,
            )

        return ClassifiedResponse(
            category=ResponseCategory.SUCCESS,
            title="Success",
            message=self.SUCCESS_MESSAGES.get(operation, "Done"),
            is_retryable_by_operator=False,
            status_code=http_status,
        )

    @staticmethod
    def extract_message(body: Any) -> Optional[str]:
        """
        Pull a display string out of an error body.

        ``{"message": "x"}`` -> "x"; ``{"message": ["a", "b"]}`` -> "a, b".
        Raw JSON text or bytes are parsed first. Returns None when no usable
        message is present.
        """
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")

        if isinstance(body, str):
            try:
                body = json.loads(body)
            except ValueError:
                return None

        if not isinstance(body, dict):
            return None

        message = body.get("message")

        if isinstance(message, list):
            parts = [str(part).strip() for part in message if part is not None]
            joined = MESSAGE_SEPARATOR.join(part for part in parts if part)
            return joined or None

        if isinstance(message, str):
            return message.strip() or None

        return None

    @staticmethod
    def capacity_kind(message: Optional[str]) -> CapacityKind:
        """
        Guess which limit a 503 refers to from its free-text message.

        The repository sends no machine-readable subtype. A message that
        mentions the numeral 5 (as in "5 GB") together with a size, "not
        ready" or "total" token is taken to mean the aggregate volume of
        unprocessed files; everything else is treated as a throughput limit.
        This is a display hint only and may misclassify other phrasings.
        """
        text = (message or "").lower()
        if PENDING_VOLUME_NUMERAL in text and any(
            token in text for token in PENDING_VOLUME_TOKENS
        ):
            return CapacityKind.PENDING_VOLUME_EXCEEDED
        return CapacityKind.THROUGHPUT_LIMIT_EXCEEDED
