"""CLI main entry point."""

import click

from cli.commands.auth import login, logout
from cli.commands.groups import list_groups
from cli.commands.health import check_health
from cli.commands.media import add_media, delete_media, edit_media, list_media
from signage_admin import __version__


@click.group()
@click.version_option(version=__version__)
def cli():
    """Signage Admin - media ingestion console for digital signage"""
    pass


# Add commands to CLI
cli.add_command(login)
cli.add_command(logout)
cli.add_command(list_groups)
cli.add_command(list_media)
cli.add_command(add_media)
cli.add_command(edit_media)
cli.add_command(delete_media)
cli.add_command(check_health)


if __name__ == "__main__":
    cli()
