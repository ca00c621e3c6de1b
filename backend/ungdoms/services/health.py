"""Health check service for the backing JSON store."""

import asyncio
import logging
import os
import time

from ungdoms.core.config import settings
from ungdoms.core.store import JsonStore
from ungdoms.models.base import utcnow
from ungdoms.schemas.health import HealthCheckResponse, HealthStatus, ServiceHealth

logger = logging.getLogger(__name__)


class HealthCheckService:
    """Service for checking health of the store."""

    def __init__(self, store: JsonStore) -> None:
        self.store = store

    async def check_store(self) -> ServiceHealth:
        """
        Check the JSON document store.

        Tests:
        - Backing file exists and its directory is writable
        - Response time

        Returns:
            ServiceHealth with store status
        """
        start_time = time.time()
        path = self.store.path

        def _probe() -> tuple[bool, bool]:
            return path.exists(), os.access(path.parent, os.W_OK)

        try:
            exists, writable = await asyncio.to_thread(_probe)
        except OSError as e:
            logger.error(f"Store health check failed: {e}", exc_info=True)
            return ServiceHealth(
                status=HealthStatus.UNHEALTHY,
                response_time_ms=(time.time() - start_time) * 1000,
                error=str(e),
            )

        response_time_ms = (time.time() - start_time) * 1000
        details: dict[str, str | int | float | bool] = {
            "path": str(path),
            "exists": exists,
            "writable": writable,
            **self.store.state.counts(),
        }

        if not exists or not writable:
            # Reads still work from memory; writes will fail
            return ServiceHealth(
                status=HealthStatus.DEGRADED,
                response_time_ms=response_time_ms,
                details=details,
                error="Store file missing" if not exists else "Store directory not writable",
            )

        return ServiceHealth(
            status=HealthStatus.HEALTHY,
            response_time_ms=response_time_ms,
            details=details,
        )

    async def perform_health_check(self) -> HealthCheckResponse:
        """
        Perform health check of all components.

        Returns:
            HealthCheckResponse with overall system health
        """
        services = {"store": await self.check_store()}

        return HealthCheckResponse(
            status=self._compute_overall_status(services),
            timestamp=utcnow(),
            version=settings.APP_VERSION,
            services=services,
        )

    def _compute_overall_status(self, services: dict[str, ServiceHealth]) -> HealthStatus:
        """
        Compute overall system health from individual components.

        Logic:
        - UNHEALTHY: Any component is unhealthy
        - DEGRADED: Any component is degraded
        - HEALTHY: All components are healthy
        """
        statuses = {service.status for service in services.values()}
        if HealthStatus.UNHEALTHY in statuses:
            return HealthStatus.UNHEALTHY
        if HealthStatus.DEGRADED in statuses:
            return HealthStatus.DEGRADED
        return HealthStatus.HEALTHY
