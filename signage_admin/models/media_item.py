"""Media item and group records as returned by the signage API."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from signage_admin.config.constants import (
    DISABLED_GROUP_SUFFIX,
    UNTITLED_MEDIA_LABEL,
)
from signage_admin.models.media_status import MediaStatus, is_terminal


def normalize_group_ids(record: Any) -> list[str]:
    """
    Read the group assignment of a media record.

    Modern records carry ``groupIds``; legacy records carry a single
    ``groupId``. ``groupIds`` wins when both are present. Duplicates are
    dropped, first occurrence order kept.

    Args:
        record: Raw mapping from the API, or an object exposing
                ``group_ids`` / ``groupIds`` / ``groupId`` attributes

    Returns:
        List of unique group ids (possibly empty)
    """
    if isinstance(record, dict):
        group_ids = record.get("groupIds", record.get("group_ids"))
        legacy_id = record.get("groupId", record.get("group_id"))
    else:
        group_ids = getattr(record, "group_ids", None)
        legacy_id = getattr(record, "group_id", None)

    if group_ids is None:
        group_ids = [legacy_id] if legacy_id else []

    return list(dict.fromkeys(str(group_id) for group_id in group_ids))


class Group(BaseModel):
    """Named collection of devices; target of media assignment."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    enabled: bool = True

    @property
    def label(self) -> str:
        """Display name, flagged when the group is disabled."""
        if self.enabled:
            return self.name
        return f"{self.name}{DISABLED_GROUP_SUFFIX}"


class MediaItem(BaseModel):
    """
    Distributable content record owned by the Media Repository.

    Field names follow Python conventions; the camelCase names used on the
    wire are accepted as aliases.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    group_ids: list[str] = Field(default_factory=list, alias="groupIds")
    url: Optional[str] = None
    name: Optional[str] = None
    status: MediaStatus
    processing_error: Optional[str] = Field(default=None, alias="processingError")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_group_id(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            data["groupIds"] = normalize_group_ids(data)
            data.pop("group_ids", None)
        return data

    @model_validator(mode="after")
    def _ready_requires_url(self) -> "MediaItem":
        if self.status == MediaStatus.READY and not self.url:
            raise ValueError(f"Media {self.id} is READY but has no url")
        return self

    def group_id_set(self) -> set[str]:
        return set(self.group_ids)

    @property
    def display_name(self) -> str:
        return self.name or UNTITLED_MEDIA_LABEL

    @property
    def is_terminal(self) -> bool:
        return is_terminal(self.status)
