"""Base service class with execution timing and error logging."""
from abc import ABC
from datetime import datetime
from typing import Optional, Dict, Any
from uuid import uuid4
from contextlib import contextmanager

from signage_admin.utils.logger import logger


class BaseService(ABC):
    """
    Base class for all services.
    Provides execution tracking through the application log.

    Service methods that talk to the remote API should use the
    track_execution context manager so every call is logged with its
    duration and, on failure, its traceback.
    """

    def __init__(self):
        self.service_name = self.__class__.__name__

    @contextmanager
    def track_execution(
        self,
        method_name: str,
        input_params: Optional[Dict[str, Any]] = None,
    ):
        """
        Context manager to track service method execution.

        Usage:
            with self.track_execution("submit", input_params={"mode": "UPLOAD"}):
                result = await self.do_work()

        Args:
            method_name: Name of the method being executed
            input_params: Parameters worth logging (never credentials)

        Yields:
            run_id: Short identifier correlating the start/finish log lines
        """
        run_id = uuid4().hex[:8]
        started_at = datetime.utcnow()
        params = f" {input_params}" if input_params else ""

        try:
            logger.info(f"[{self.service_name}.{method_name}] Starting (run_id: {run_id}){params}")

            yield run_id

            duration_ms = int((datetime.utcnow() - started_at).total_seconds() * 1000)
            logger.info(f"[{self.service_name}.{method_name}] Completed ({duration_ms}ms, run_id: {run_id})")

        except Exception as e:
            duration_ms = int((datetime.utcnow() - started_at).total_seconds() * 1000)
            logger.error(
                f"[{self.service_name}.{method_name}] Failed after {duration_ms}ms: {e}", exc_info=True
            )
            raise
