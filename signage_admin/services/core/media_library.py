"""Media library - the console's read-only view of media and groups."""

from collections import Counter
from typing import Optional

from signage_admin.config.constants import UNASSIGNED_LABEL, UNKNOWN_GROUP_LABEL
from signage_admin.models.media_item import Group, MediaItem
from signage_admin.models.media_status import MediaStatus, StatusChange, diff_statuses
from signage_admin.services.base_service import BaseService
from signage_admin.services.integrations.signage_api import SignageAPIClient


class MediaLibrary(BaseService):
    """
    Last-known media list and group directory.

    The list is only ever replaced wholesale by ``refresh()``; nothing patches
    it locally. Processing status changes are observed by refreshing, never
    pushed. Concurrent refreshes are not serialized: whichever response
    arrives last wins.
    """

    def __init__(self, client: SignageAPIClient):
        super().__init__()
        self.client = client
        self.items: list[MediaItem] = []
        self.groups: list[Group] = []
        self.last_changes: list[StatusChange] = []

    async def refresh(self) -> list[MediaItem]:
        """
        Re-read the media list from the repository.

        On failure the previous list is kept and the error propagates.

        Returns:
            The new list
        """
        with self.track_execution(method_name="refresh"):
            items = await self.client.list_media()

        self.last_changes = diff_statuses(self.items, items)
        self.items = items
        return items

    async def load_groups(self) -> list[Group]:
        with self.track_execution(method_name="load_groups"):
            self.groups = await self.client.list_groups()
        return self.groups

    def get(self, media_id: str) -> Optional[MediaItem]:
        return next((item for item in self.items if item.id == media_id), None)

    def group_name(self, group_id: str) -> str:
        """Name of a group; the raw id when groups have not been loaded."""
        if not self.groups:
            return group_id
        group = next((g for g in self.groups if g.id == group_id), None)
        return group.name if group else UNKNOWN_GROUP_LABEL

    def group_names(self, item: MediaItem) -> str:
        if not item.group_ids:
            return UNASSIGNED_LABEL
        return ", ".join(self.group_name(group_id) for group_id in item.group_ids)

    def status_counts(self) -> dict[MediaStatus, int]:
        """Number of items per status (every status present, zero if none)."""
        counts = Counter(item.status for item in self.items)
        return {status: counts.get(status, 0) for status in MediaStatus}
