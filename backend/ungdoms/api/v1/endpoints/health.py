"""Health check API endpoints."""

from fastapi import APIRouter, HTTPException, status

from ungdoms.api.dependencies import StoreDep
from ungdoms.schemas.health import HealthCheckResponse, HealthStatus
from ungdoms.services.health import HealthCheckService

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="System health check",
    description="Check health of the backing JSON store",
    tags=["Health"],
)
async def health_check(store: StoreDep) -> HealthCheckResponse:
    """
    Perform health check of all components.

    Response statuses:
    - `healthy`: Store file present and writable
    - `degraded`: Store served from memory but the file is missing or read-only
    - `unhealthy`: Store cannot be probed

    Returns:
        HealthCheckResponse with detailed component statuses
    """
    return await HealthCheckService(store).perform_health_check()


@router.get(
    "/health/live",
    status_code=status.HTTP_200_OK,
    summary="Liveness probe",
    tags=["Health"],
)
async def liveness_probe() -> dict[str, str]:
    """Always 200 while the process is running."""
    return {"status": "alive"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness probe",
    tags=["Health"],
    responses={
        200: {"description": "Service is ready to accept traffic"},
        503: {"description": "Store is not usable"},
    },
)
async def readiness_probe(store: StoreDep) -> dict[str, str]:
    """
    Readiness probe.

    Raises:
        HTTPException: 503 if the store is not healthy
    """
    health_response = await HealthCheckService(store).perform_health_check()

    if health_response.status != HealthStatus.HEALTHY:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "status": "not_ready",
                "services": {
                    name: {"status": service.status.value, "error": service.error}
                    for name, service in health_response.services.items()
                    if service.status != HealthStatus.HEALTHY
                },
            },
        )

    return {"status": "ready"}
