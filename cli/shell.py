"""Rich rendering of media outcomes and lists."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from signage_admin.models.media_item import Group, MediaItem
from signage_admin.models.media_status import MediaStatus, StatusChange
from signage_admin.services.core.media_library import MediaLibrary
from signage_admin.services.core.presentation import Outcome, PresentationShell

STATUS_STYLES = {
    MediaStatus.READY: "green",
    MediaStatus.PENDING: "yellow",
    MediaStatus.FAILED: "red",
}


def render_media_table(items: list[MediaItem], library: MediaLibrary) -> Table:
    table = Table(title=f"Media ({len(items)})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Groups")
    table.add_column("URL / Error", overflow="fold")

    for item in items:
        style = STATUS_STYLES.get(item.status, "white")
        detail = item.url or ""
        if item.processing_error:
            detail = f"[red]{item.processing_error}[/red]"

        table.add_row(
            item.id,
            item.display_name,
            f"[{style}]{item.status.label}[/{style}]",
            library.group_names(item),
            detail,
        )

    return table


def render_group_table(groups: list[Group]) -> Table:
    table = Table(title=f"Groups ({len(groups)})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Enabled", justify="center")

    for group in groups:
        enabled = "[green]✓[/green]" if group.enabled else "[dim]disabled[/dim]"
        table.add_row(group.id, group.name, enabled)

    return table


def format_status_change(change: StatusChange) -> str:
    style = STATUS_STYLES.get(change.current, "white")
    if change.previous is None:
        return f"  [cyan]{change.media_id}[/cyan] new ([{style}]{change.current.label}[/{style}])"
    return (
        f"  [cyan]{change.media_id}[/cyan] {change.previous.label} → "
        f"[{style}]{change.current.label}[/{style}]"
    )


class RichShell(PresentationShell):
    """Console implementation of the presentation shell."""

    def __init__(self, library: MediaLibrary, console: Optional[Console] = None):
        self.library = library
        self.console = console or Console()
        self.session_closed = False

    def notify(self, outcome: Outcome) -> None:
        if outcome.is_success:
            self.console.print(
                Panel(outcome.message, title=f"✓ {outcome.title}", border_style="green")
            )
            return

        message = outcome.message
        capacity_kind = getattr(outcome, "capacity_kind", None)
        if capacity_kind is not None:
            message += f"\n[dim]({capacity_kind.value}, best-effort guess)[/dim]"

        self.console.print(Panel(message, title=f"✗ {outcome.title}", border_style="red"))

    def close_session(self) -> None:
        self.session_closed = True

    def show_media(self, items: list[MediaItem]) -> None:
        if not items:
            self.console.print("[yellow]No media found[/yellow]")
            return
        self.console.print(render_media_table(items, self.library))
