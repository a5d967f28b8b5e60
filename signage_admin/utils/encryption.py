"""Token encryption utility for the on-disk credential store."""

from typing import Optional

from cryptography.fernet import Fernet, InvalidToken

from signage_admin.config.settings import settings
from signage_admin.utils.logger import logger


class TokenEncryption:
    """
    Encrypt/decrypt the bearer token before it is written to disk.

    Uses Fernet symmetric encryption (AES-128-CBC with HMAC).
    The key comes from ENCRYPTION_KEY in .env unless passed explicitly.

    Usage:
        encryption = TokenEncryption()
        encrypted = encryption.encrypt("my_secret_token")
        decrypted = encryption.decrypt(encrypted)

        # Generate a new key (one-time setup)
        key = TokenEncryption.generate_key()
    """

    def __init__(self, key: Optional[str] = None):
        key = key or settings.ENCRYPTION_KEY
        if not key:
            raise ValueError(
                "ENCRYPTION_KEY not configured. "
                'Generate one with: python -c "from signage_admin.utils.encryption import TokenEncryption; print(TokenEncryption.generate_key())"'
            )

        try:
            self._cipher = Fernet(key.encode())
        except Exception as e:
            raise ValueError(f"Invalid ENCRYPTION_KEY format: {e}")

    def encrypt(self, plaintext: str) -> str:
        """Encrypt a token. Returns a URL-safe base64 string."""
        if not plaintext:
            raise ValueError("Cannot encrypt empty string")

        return self._cipher.encrypt(plaintext.encode()).decode()

    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt a token.

        Raises:
            ValueError: If decryption fails (wrong key or corrupted data)
        """
        if not ciphertext:
            raise ValueError("Cannot decrypt empty string")

        try:
            return self._cipher.decrypt(ciphertext.encode()).decode()
        except InvalidToken:
            logger.error("Token decryption failed - key mismatch or corrupted data")
            raise ValueError(
                "Failed to decrypt token. "
                "This may indicate the ENCRYPTION_KEY has changed or data is corrupted."
            )

    @staticmethod
    def generate_key() -> str:
        """
        Generate a new encryption key.

        Store the result in .env:
            ENCRYPTION_KEY=<generated_key>
        """
        return Fernet.generate_key().decode()
