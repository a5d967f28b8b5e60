"""Data models for media items, groups and operation outcomes."""

from signage_admin.models.media_status import (
    MediaStatus,
    StatusChange,
    can_transition,
    diff_statuses,
    is_terminal,
)
from signage_admin.models.media_item import Group, MediaItem, normalize_group_ids
from signage_admin.models.outcome import (
    CapacityKind,
    ClassifiedResponse,
    Operation,
    ResponseCategory,
    ValidationOutcome,
)

__all__ = [
    "MediaStatus",
    "StatusChange",
    "can_transition",
    "diff_statuses",
    "is_terminal",
    "Group",
    "MediaItem",
    "normalize_group_ids",
    "CapacityKind",
    "ClassifiedResponse",
    "Operation",
    "ResponseCategory",
    "ValidationOutcome",
]
