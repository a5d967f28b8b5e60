"""Wire the console services together."""

from dataclasses import dataclass
from typing import Callable, Optional

from signage_admin.services.core.auth_service import AuthService
from signage_admin.services.core.health_check import HealthCheckService
from signage_admin.services.core.media_ingestion import MediaIngestionService
from signage_admin.services.core.media_library import MediaLibrary
from signage_admin.services.core.media_session import MediaSession
from signage_admin.services.core.presentation import PresentationShell
from signage_admin.services.integrations.credentials import (
    CredentialProvider,
    FileCredentialStore,
)
from signage_admin.services.integrations.signage_api import SignageAPIClient


@dataclass
class ConsoleServices:
    """One console instance: a credential, one session, one media library."""

    credentials: CredentialProvider
    client: SignageAPIClient
    library: MediaLibrary
    session: MediaSession
    ingestion: MediaIngestionService
    auth: AuthService
    health: HealthCheckService


def create_console(
    shell_factory: Optional[Callable[[MediaLibrary], PresentationShell]] = None,
    credentials: Optional[CredentialProvider] = None,
) -> ConsoleServices:
    """
    Build the services for one console instance.

    Args:
        shell_factory: Builds the presentation shell from the media library
                       (defaults to a silent shell)
        credentials: Credential provider (defaults to the on-disk store)
    """
    if credentials is None:
        credentials = CredentialProvider(store=FileCredentialStore())

    client = SignageAPIClient(credentials)
    library = MediaLibrary(client)
    session = MediaSession()
    shell = shell_factory(library) if shell_factory else PresentationShell()

    return ConsoleServices(
        credentials=credentials,
        client=client,
        library=library,
        session=session,
        ingestion=MediaIngestionService(client, library, session=session, shell=shell),
        auth=AuthService(client, credentials),
        health=HealthCheckService(library, credentials),
    )
