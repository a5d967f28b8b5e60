"""Group directory CLI commands."""

import asyncio

import click
from rich.console import Console

from cli.shell import render_group_table
from signage_admin.exceptions import SignageError
from signage_admin.services.factory import create_console

console = Console()


@click.command(name="list-groups")
def list_groups():
    """List groups available for media assignment."""
    services = create_console()

    try:
        groups = asyncio.run(services.library.load_groups())
    except SignageError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {str(e)}")
        raise click.Abort()

    if not groups:
        console.print("[yellow]No groups found. Create groups in the admin panel first.[/yellow]")
        return

    console.print(render_group_table(groups))
