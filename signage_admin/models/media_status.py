"""Media processing status and its lifecycle.

The repository processes uploads asynchronously, out of band. The console
never drives a transition itself: it only observes them by re-reading the
media list.

    PENDING --> READY
    PENDING --> FAILED

READY and FAILED are terminal from the console's point of view. Recovering
from FAILED means creating a new item or editing it with new URL content,
which the repository treats as a fresh PENDING attempt.
"""

from enum import Enum
from typing import Iterable, NamedTuple, Optional

from signage_admin.utils.logger import logger


class MediaStatus(str, Enum):
    PENDING = "PENDING"
    READY = "READY"
    FAILED = "FAILED"

    @property
    def label(self) -> str:
        return self.value.capitalize()


INITIAL_STATUS = MediaStatus.PENDING

ALLOWED_TRANSITIONS = {
    MediaStatus.PENDING: frozenset({MediaStatus.READY, MediaStatus.FAILED}),
    MediaStatus.READY: frozenset(),
    MediaStatus.FAILED: frozenset(),
}


def is_terminal(status: MediaStatus) -> bool:
    """True if no further transition is expected for this status."""
    return not ALLOWED_TRANSITIONS[status]


def can_transition(source: MediaStatus, target: MediaStatus) -> bool:
    return target in ALLOWED_TRANSITIONS[source]


class StatusChange(NamedTuple):
    """A transition observed between two snapshots of the media list."""

    media_id: str
    previous: Optional[MediaStatus]
    current: MediaStatus


def diff_statuses(previous_items: Iterable, current_items: Iterable) -> list[StatusChange]:
    """
    Compare two list snapshots and report status changes.

    Items that are new in ``current_items`` are reported with
    ``previous=None``. Items that disappeared are ignored (deleted elsewhere).
    An observed change the lifecycle does not allow (e.g. READY -> PENDING
    after a URL edit) is still reported, with a warning logged.

    Args:
        previous_items: MediaItem records from the earlier fetch
        current_items: MediaItem records from the latest fetch

    Returns:
        List of StatusChange in ``current_items`` order
    """
    before = {item.id: item.status for item in previous_items}
    changes = []

    for item in current_items:
        old_status = before.get(item.id)
        if old_status == item.status:
            continue

        if old_status is not None and not can_transition(old_status, item.status):
            logger.warning(
                f"Media {item.id} moved {old_status.value} -> {item.status.value} "
                f"(resubmitted or changed outside this console)"
            )

        changes.append(StatusChange(item.id, old_status, item.status))

    return changes
