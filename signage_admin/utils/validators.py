"""Configuration validation."""

import logging
from typing import List, Tuple
from urllib.parse import urlparse

from signage_admin.config.settings import settings


class ConfigValidator:
    """Validate configuration on startup."""

    @staticmethod
    def validate_all() -> Tuple[bool, List[str]]:
        """
        Validate all configuration settings.

        Returns:
            (is_valid, error_messages)
        """
        errors = []

        parsed = urlparse(settings.API_URL)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            errors.append(f"API_URL must be an http(s) URL, got: {settings.API_URL!r}")

        if settings.API_TIMEOUT_SECONDS is not None and settings.API_TIMEOUT_SECONDS <= 0:
            errors.append("API_TIMEOUT_SECONDS must be positive (or unset to disable)")

        if settings.SESSION_RESET_DELAY_SECONDS < 0:
            errors.append("SESSION_RESET_DELAY_SECONDS cannot be negative")

        if not isinstance(logging.getLevelName(settings.LOG_LEVEL.upper()), int):
            errors.append(f"LOG_LEVEL is not a valid level: {settings.LOG_LEVEL}")

        if not settings.CREDENTIALS_FILE:
            errors.append("CREDENTIALS_FILE is required")

        is_valid = len(errors) == 0
        return is_valid, errors
