"""API v1 router configuration."""

from fastapi import APIRouter

from ungdoms.api.v1.endpoints import (
    care_plans,
    clients,
    health,
    implementation_plans,
    monthly_reports,
    overview,
    staff,
    vimsa_time,
    weekly_documentation,
)

api_router = APIRouter()

api_router.include_router(staff.router, tags=["Staff"])
api_router.include_router(clients.router, tags=["Clients"])
api_router.include_router(care_plans.router, tags=["Care plans"])
api_router.include_router(implementation_plans.router, tags=["Implementation plans"])
api_router.include_router(weekly_documentation.router, tags=["Weekly documentation"])
api_router.include_router(monthly_reports.router, tags=["Monthly reports"])
api_router.include_router(vimsa_time.router, tags=["Vimsa time"])
api_router.include_router(overview.router, tags=["Overview"])
api_router.include_router(health.router)
