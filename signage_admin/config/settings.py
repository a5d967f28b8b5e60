"""Application settings and configuration management."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Remote API (Media Repository + Group Directory)
    API_URL: str = "http://localhost:3000/api"
    API_TIMEOUT_SECONDS: Optional[float] = 30.0  # None disables the client timeout

    # Session credentials
    CREDENTIALS_FILE: str = "~/.signage-admin/credentials"
    ENCRYPTION_KEY: Optional[str] = None  # Fernet key for encrypting the stored token

    # Dialog/session behaviour
    SESSION_RESET_DELAY_SECONDS: float = 0.3  # Lets a closing animation finish

    # Development Settings
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/app.log"

    @field_validator("API_TIMEOUT_SECONDS", mode="before")
    @classmethod
    def _blank_timeout_disables(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def api_base_url(self) -> str:
        """API origin without trailing slashes."""
        return self.API_URL.rstrip("/")


# Global settings instance
settings = Settings()
