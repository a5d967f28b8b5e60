"""Media-related CLI commands."""

import asyncio
from typing import Optional

import click
from rich.console import Console

from cli.shell import RichShell, format_status_change
from signage_admin.exceptions import SignageError
from signage_admin.services.core.media_session import IngestionMode
from signage_admin.services.factory import ConsoleServices, create_console

console = Console()


def _console_services() -> ConsoleServices:
    return create_console(shell_factory=lambda library: RichShell(library, console))


async def _load_views(services: ConsoleServices) -> None:
    await services.library.load_groups()
    await services.library.refresh()


@click.command(name="list-media")
@click.option("--watch", type=float, default=None, help="Re-fetch every N seconds")
@click.option("--max-refreshes", default=0, help="Stop watching after N refreshes (0 = until Ctrl-C)")
def list_media(watch, max_refreshes):
    """List media items and their processing status.

    Processing runs on the server; status changes only show up when the list
    is fetched again. Use --watch to keep refreshing.
    """
    services = _console_services()

    try:
        asyncio.run(_load_views(services))
    except SignageError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {str(e)}")
        raise click.Abort()

    services.ingestion.shell.show_media(services.library.items)
    _print_counts(services)

    if not watch:
        return

    try:
        asyncio.run(_watch(services, watch, max_refreshes))
    except KeyboardInterrupt:
        console.print("\n[dim]Stopped watching[/dim]")
    except SignageError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {str(e)}")
        raise click.Abort()


async def _watch(services: ConsoleServices, interval: float, max_refreshes: int) -> None:
    refreshes = 0
    while not max_refreshes or refreshes < max_refreshes:
        await asyncio.sleep(interval)
        await services.library.refresh()
        refreshes += 1

        for change in services.library.last_changes:
            console.print(format_status_change(change))


def _print_counts(services: ConsoleServices) -> None:
    counts = services.library.status_counts()
    summary = ", ".join(f"{status.label}: {count}" for status, count in counts.items())
    console.print(f"[dim]{summary}[/dim]")


@click.command(name="add-media")
@click.option("--file", "file_path", type=click.Path(dir_okay=False), help="Video file to upload")
@click.option("--url", help="Remote URL of the video")
@click.option("--group", "-g", "groups", multiple=True, help="Group ID (repeatable)")
@click.option("--name", default="", help="Display name")
def add_media(file_path, url, groups, name):
    """Add media by uploading a file or referencing a URL.

    Uploaded files are queued for server-side processing and show up as
    Pending until processing finishes.
    """
    if file_path and url:
        raise click.UsageError("Use either --file or --url, not both")

    services = _console_services()
    outcome = asyncio.run(_add_media(services, file_path, url, groups, name))

    if not outcome.is_success:
        raise click.Abort()


async def _add_media(
    services: ConsoleServices,
    file_path: Optional[str],
    url: Optional[str],
    groups: tuple,
    name: str,
):
    submission = services.session.open_create()
    submission.mode = IngestionMode.URL_REFERENCE if url else IngestionMode.UPLOAD
    for group_id in dict.fromkeys(groups):
        submission.assignment.toggle(group_id)
    submission.name = name
    submission.url = url or ""
    submission.file_path = file_path

    return await services.ingestion.submit(submission)


@click.command(name="edit-media")
@click.argument("media_id")
@click.option("--url", help="New URL (defaults to the current one)")
@click.option("--name", default=None, help="New display name")
@click.option("--group", "-g", "groups", multiple=True, help="Replace groups with these IDs")
@click.option("--toggle-group", "-t", "toggles", multiple=True, help="Check/uncheck a group ID")
def edit_media(media_id, url, name, groups, toggles):
    """Edit an existing media item.

    Edits always go through the URL; a file cannot be re-uploaded onto an
    existing item.
    """
    services = _console_services()

    try:
        outcome = asyncio.run(_edit_media(services, media_id, url, name, groups, toggles))
    except SignageError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {str(e)}")
        raise click.Abort()

    if not outcome.is_success:
        raise click.Abort()


async def _edit_media(
    services: ConsoleServices,
    media_id: str,
    url: Optional[str],
    name: Optional[str],
    groups: tuple,
    toggles: tuple,
):
    await services.library.refresh()
    item = services.library.get(media_id)
    if item is None:
        raise SignageError(f"Media not found: {media_id}")

    submission = services.session.open_edit(item)

    if groups:
        submission.assignment.clear()
        for group_id in dict.fromkeys(groups):
            submission.assignment.toggle(group_id)
    for group_id in toggles:
        submission.assignment.toggle(group_id)

    if url is not None:
        submission.url = url
    if name is not None:
        submission.name = name

    return await services.ingestion.submit(submission)


@click.command(name="delete-media")
@click.argument("media_id")
@click.option("--yes", is_flag=True, help="Skip confirmation")
def delete_media(media_id, yes):
    """Delete a media item."""
    if not yes and not click.confirm(f"Delete media {media_id}?"):
        console.print("[dim]Cancelled[/dim]")
        return

    services = _console_services()
    outcome = asyncio.run(services.ingestion.delete(media_id))

    if not outcome.is_success:
        raise click.Abort()
