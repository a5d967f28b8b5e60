"""Health check service - console configuration and backend reachability."""

from datetime import datetime

from signage_admin.exceptions import SignageError
from signage_admin.models.media_status import MediaStatus
from signage_admin.services.base_service import BaseService
from signage_admin.services.core.media_library import MediaLibrary
from signage_admin.services.integrations.credentials import CredentialProvider
from signage_admin.utils.logger import logger
from signage_admin.utils.validators import ConfigValidator


class HealthCheckService(BaseService):
    """Console health monitoring."""

    FAILED_MEDIA_THRESHOLD = 0

    def __init__(self, library: MediaLibrary, credentials: CredentialProvider):
        super().__init__()
        self.library = library
        self.credentials = credentials

    async def check_all(self) -> dict:
        """
        Run all health checks.

        Returns:
            Dict with overall status and individual check results
        """
        checks = {
            "config": self._check_config(),
            "credentials": self._check_credentials(),
        }

        if checks["credentials"]["healthy"]:
            checks["api"] = await self._check_api()
            if checks["api"]["healthy"]:
                checks["media"] = self._check_media()

        all_healthy = all(check["healthy"] for check in checks.values())
        overall_status = "healthy" if all_healthy else "unhealthy"

        return {
            "status": overall_status,
            "checks": checks,
            "timestamp": datetime.utcnow().isoformat(),
        }

    def _check_config(self) -> dict:
        is_valid, errors = ConfigValidator.validate_all()
        if is_valid:
            return {"healthy": True, "message": "Configuration OK"}
        return {"healthy": False, "message": "; ".join(errors)}

    def _check_credentials(self) -> dict:
        if not self.credentials.is_authenticated:
            return {"healthy": False, "message": "Not logged in"}
        return {"healthy": True, "message": "Session credential present"}

    async def _check_api(self) -> dict:
        """Fetch groups and media; both must succeed."""
        try:
            groups = await self.library.load_groups()
            items = await self.library.refresh()
        except SignageError as e:
            logger.error(f"API health check failed: {e}")
            return {"healthy": False, "message": f"API error: {e}"}

        return {
            "healthy": True,
            "message": f"API reachable ({len(groups)} groups, {len(items)} media)",
        }

    def _check_media(self) -> dict:
        counts = self.library.status_counts()
        failed = counts[MediaStatus.FAILED]
        pending = counts[MediaStatus.PENDING]

        if failed > self.FAILED_MEDIA_THRESHOLD:
            return {
                "healthy": False,
                "message": f"{failed} media failed processing ({pending} pending)",
                "failed_count": failed,
                "pending_count": pending,
            }

        return {
            "healthy": True,
            "message": f"No failed media ({pending} pending)",
            "failed_count": failed,
            "pending_count": pending,
        }
