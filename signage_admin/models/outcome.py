"""Operator-facing outcomes of media operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ResponseCategory(str, Enum):
    ACCEPTED = "ACCEPTED"
    SUCCESS = "SUCCESS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    CAPACITY_ERROR = "CAPACITY_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    TRANSPORT_ERROR = "TRANSPORT_ERROR"


SUCCESS_CATEGORIES = frozenset({ResponseCategory.ACCEPTED, ResponseCategory.SUCCESS})


class CapacityKind(str, Enum):
    """Heuristic sub-cause of a 503. A display hint, not an authoritative code."""

    PENDING_VOLUME_EXCEEDED = "PENDING_VOLUME_EXCEEDED"
    THROUGHPUT_LIMIT_EXCEEDED = "THROUGHPUT_LIMIT_EXCEEDED"


class Operation(str, Enum):
    """Repository operation a response belongs to."""

    UPLOAD = "UPLOAD"
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    LIST = "LIST"


@dataclass(frozen=True)
class ClassifiedResponse:
    """
    Result of classifying a repository response.

    Attributes:
        category: Outcome category
        title: Short heading for the status surface
        message: Detail shown under the title
        is_retryable_by_operator: Whether re-submitting the form may help
        capacity_kind: Sub-cause, only set for CAPACITY_ERROR
        status_code: HTTP status, None for transport failures
    """

    category: ResponseCategory
    title: str
    message: str
    is_retryable_by_operator: bool
    capacity_kind: Optional[CapacityKind] = None
    status_code: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.category in SUCCESS_CATEGORIES


@dataclass(frozen=True)
class ValidationOutcome:
    """Pre-flight rejection. Produced locally; no request was sent."""

    message: str
    title: str = "Validation failed"

    category = None
    is_retryable_by_operator = True

    @property
    def is_success(self) -> bool:
        return False
