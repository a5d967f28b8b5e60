"""Working set of group associations for the media item being edited."""

from typing import Any, Iterable, Optional

from signage_admin.models.media_item import normalize_group_ids


class GroupAssignment:
    """
    Set of group ids with checkbox-style toggle semantics.

    Usage:
        assignment = GroupAssignment()
        assignment.initialize_from(media_item)   # legacy groupId or groupIds
        assignment.toggle("g1")                  # add if absent, remove if present
        if assignment.is_empty():
            ...
        payload = {"groupIds": assignment.group_ids}
    """

    def __init__(self, group_ids: Optional[Iterable[str]] = None):
        self._group_ids: set[str] = set(group_ids or ())

    def toggle(self, group_id: str) -> None:
        if group_id in self._group_ids:
            self._group_ids.remove(group_id)
        else:
            self._group_ids.add(group_id)

    def initialize_from(self, item: Any) -> None:
        """Replace the working set with the groups of an existing record."""
        self._group_ids = set(normalize_group_ids(item))

    def clear(self) -> None:
        self._group_ids = set()

    def is_empty(self) -> bool:
        return not self._group_ids

    @property
    def group_ids(self) -> list[str]:
        """Snapshot of the set, sorted for stable request bodies."""
        return sorted(self._group_ids)

    def as_set(self) -> frozenset[str]:
        return frozenset(self._group_ids)

    def __contains__(self, group_id: str) -> bool:
        return group_id in self._group_ids

    def __len__(self) -> int:
        return len(self._group_ids)

    def __repr__(self):
        return f"<GroupAssignment {self.group_ids}>"
