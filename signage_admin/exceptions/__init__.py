"""Signage Admin exception classes."""

from signage_admin.exceptions.base import SignageError
from signage_admin.exceptions.api import (
    SignageAPIError,
    APIValidationError,
    AuthenticationError,
    NotAuthenticatedError,
    CapacityError,
    TransportError,
)
from signage_admin.exceptions.session import SessionStateError

__all__ = [
    "SignageError",
    "SignageAPIError",
    "APIValidationError",
    "AuthenticationError",
    "NotAuthenticatedError",
    "CapacityError",
    "TransportError",
    "SessionStateError",
]
