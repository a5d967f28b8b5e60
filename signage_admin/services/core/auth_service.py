"""Auth service - acquire and release the session credential."""

from signage_admin.services.base_service import BaseService
from signage_admin.services.integrations.credentials import CredentialProvider
from signage_admin.services.integrations.signage_api import SignageAPIClient


class AuthService(BaseService):
    """Login/logout against the admin auth endpoint.

    Token issuance itself belongs to the backend; this only stores what it
    hands back.
    """

    def __init__(self, client: SignageAPIClient, credentials: CredentialProvider):
        super().__init__()
        self.client = client
        self.credentials = credentials

    async def login(self, username: str, password: str) -> None:
        """
        Raises:
            AuthenticationError: Credentials refused
            TransportError: Auth endpoint unreachable
        """
        with self.track_execution(method_name="login", input_params={"username": username}):
            token = await self.client.login(username, password)
            self.credentials.acquire(token)

    def logout(self) -> None:
        self.credentials.clear()
