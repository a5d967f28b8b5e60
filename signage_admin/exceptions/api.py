"""Remote API related exceptions."""

from typing import Optional

from signage_admin.exceptions.base import SignageError


class SignageAPIError(SignageError):
    """
    General error returned by the signage API.

    Raised by read operations (list groups, list media, login) when the
    repository answers with a non-success status. Submissions never raise
    this; they return a classified outcome instead.

    Attributes:
        message: Human-readable error description (repository message when present)
        status_code: HTTP status of the response, None when no response arrived
        category: Classifier category name (e.g. 'VALIDATION_ERROR')
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        category: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.category = category

    def __str__(self) -> str:
        base = super().__str__()
        if self.status_code:
            return f"{base} (status: {self.status_code})"
        return base


class APIValidationError(SignageAPIError):
    """Repository-side field validation failed (HTTP 400)."""

    def __init__(
        self,
        message: str = "Validation error",
        **kwargs,
    ):
        super().__init__(message, **kwargs)


class AuthenticationError(SignageAPIError):
    """
    Bearer credential is invalid or expired (HTTP 401), or login was refused.

    The operator must log in again; the request is not retried.
    """

    def __init__(
        self,
        message: str = "Authentication required. Please log in again.",
        **kwargs,
    ):
        super().__init__(message, **kwargs)


class NotAuthenticatedError(AuthenticationError):
    """No credential has been acquired for this session (never logged in)."""

    def __init__(
        self,
        message: str = "Not logged in. Run 'signage-cli login' first.",
        **kwargs,
    ):
        super().__init__(message, **kwargs)


class CapacityError(SignageAPIError):
    """
    Repository refused new work because of a load or volume limit (HTTP 503).

    Attributes:
        capacity_kind: Best-effort sub-cause derived from the message text
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        capacity_kind: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.capacity_kind = capacity_kind


class TransportError(SignageAPIError):
    """No response reached the console (connection refused, DNS, reset...)."""

    def __init__(
        self,
        message: str = "Could not reach the signage API",
        **kwargs,
    ):
        super().__init__(message, **kwargs)
