"""Interface between the ingestion core and whatever renders it."""

from typing import Union

from signage_admin.models.media_item import MediaItem
from signage_admin.models.outcome import ClassifiedResponse, ValidationOutcome

Outcome = Union[ClassifiedResponse, ValidationOutcome]


class PresentationShell:
    """
    Callbacks the core uses to update the operator's view.

    The default implementation does nothing, which suits scripts and tests.
    The CLI provides a rich-based implementation.
    """

    def notify(self, outcome: Outcome) -> None:
        """Show an outcome on the status/toast surface."""

    def close_session(self) -> None:
        """Dismiss the active create/edit dialog."""

    def show_media(self, items: list[MediaItem]) -> None:
        """Render a freshly fetched media list."""
