"""Bearer credential held for the console session."""

import os
from pathlib import Path
from typing import Optional

from signage_admin.config.settings import settings
from signage_admin.exceptions import NotAuthenticatedError
from signage_admin.utils.encryption import TokenEncryption
from signage_admin.utils.logger import logger


class FileCredentialStore:
    """
    Persist the bearer token between CLI invocations.

    The token is Fernet-encrypted when ENCRYPTION_KEY is configured and stored
    as plain text otherwise. The file is created with owner-only permissions.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        encryption: Optional[TokenEncryption] = None,
    ):
        self.path = Path(path or settings.CREDENTIALS_FILE).expanduser()
        if encryption is None and settings.ENCRYPTION_KEY:
            encryption = TokenEncryption()
        self.encryption = encryption

    def load(self) -> Optional[str]:
        """Read the stored token, or None if absent or unreadable."""
        if not self.path.is_file():
            return None

        raw = self.path.read_text(encoding="utf-8").strip()
        if not raw:
            return None

        if self.encryption is None:
            return raw

        try:
            return self.encryption.decrypt(raw)
        except ValueError as e:
            logger.warning(f"Ignoring stored credential at {self.path}: {e}")
            return None

    def save(self, token: str) -> None:
        value = self.encryption.encrypt(token) if self.encryption else token

        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(value)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class CredentialProvider:
    """
    Source of the bearer credential for every authenticated request.

    Lifecycle: acquired on login, read-only during the session, cleared on
    logout. Injected into the API client instead of being read from global
    state, so tests and alternative shells can supply their own.

    Usage:
        credentials = CredentialProvider(store=FileCredentialStore())
        credentials.acquire(access_token)      # after login
        headers = credentials.authorization_header()
        credentials.clear()                    # logout
    """

    def __init__(self, store: Optional[FileCredentialStore] = None):
        self.store = store
        self._token: Optional[str] = store.load() if store else None

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token)

    def acquire(self, token: str) -> None:
        """Hold a freshly issued token (and persist it if a store is attached)."""
        if not token:
            raise ValueError("Cannot acquire an empty token")

        self._token = token
        if self.store:
            self.store.save(token)
        logger.info("Session credential acquired")

    def clear(self) -> None:
        self._token = None
        if self.store:
            self.store.clear()
        logger.info("Session credential cleared")

    def authorization_header(self) -> dict:
        """
        Build the Authorization header.

        Raises:
            NotAuthenticatedError: If no token has been acquired
        """
        if not self._token:
            raise NotAuthenticatedError()
        return {"Authorization": f"Bearer {self._token}"}
