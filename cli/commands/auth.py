"""Login/logout CLI commands."""

import asyncio

import click
from rich.console import Console

from signage_admin.exceptions import SignageError
from signage_admin.services.factory import create_console

console = Console()


@click.command(name="login")
@click.option("--username", "-u", prompt=True, help="Admin username")
@click.option("--password", "-p", prompt=True, hide_input=True, help="Admin password")
def login(username, password):
    """Log in and store the session token."""
    services = create_console()

    try:
        asyncio.run(services.auth.login(username, password))
    except SignageError as e:
        console.print(f"[bold red]✗ Login failed:[/bold red] {str(e)}")
        raise click.Abort()

    console.print(f"[bold green]✓ Logged in as {username}[/bold green]")


@click.command(name="logout")
def logout():
    """Forget the stored session token."""
    services = create_console()
    services.auth.logout()
    console.print("[green]✓ Logged out[/green]")
