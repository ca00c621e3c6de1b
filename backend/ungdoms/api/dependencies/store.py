"""Store and repository dependencies for API endpoints."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status

from ungdoms.core.config import Settings, get_settings
from ungdoms.core.store import JsonStore
from ungdoms.services.people import ClientRepository, StaffRepository
from ungdoms.services.plans import CarePlanRepository, ImplementationPlanRepository
from ungdoms.services.reporting import (
    MonthlyReportRepository,
    VimsaTimeRepository,
    WeeklyDocumentationRepository,
)


def get_store(request: Request) -> JsonStore:
    """
    Store instance owned by the application.

    Raises:
        HTTPException: 503 if the store has not been loaded
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Store is not loaded",
        )
    return store


StoreDep = Annotated[JsonStore, Depends(get_store)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_staff_repository(store: StoreDep) -> StaffRepository:
    return StaffRepository(store)


def get_client_repository(store: StoreDep) -> ClientRepository:
    return ClientRepository(store)


def get_care_plan_repository(store: StoreDep, settings: SettingsDep) -> CarePlanRepository:
    return CarePlanRepository(store, settings.STORE_ENFORCE_STATUS_TRANSITIONS)


def get_implementation_plan_repository(
    store: StoreDep, settings: SettingsDep
) -> ImplementationPlanRepository:
    return ImplementationPlanRepository(store, settings.STORE_ENFORCE_STATUS_TRANSITIONS)


def get_weekly_documentation_repository(store: StoreDep) -> WeeklyDocumentationRepository:
    return WeeklyDocumentationRepository(store)


def get_monthly_report_repository(store: StoreDep) -> MonthlyReportRepository:
    return MonthlyReportRepository(store)


def get_vimsa_time_repository(store: StoreDep) -> VimsaTimeRepository:
    return VimsaTimeRepository(store)


async def get_expected_version(
    settings: SettingsDep,
    if_match: Annotated[str | None, Header(alias="If-Match")] = None,
) -> int | None:
    """
    Version the client expects to overwrite, from the ``If-Match`` header.

    Accepts ``3``, ``"3"`` and ``W/"3"``.

    Returns:
        The expected version, or None when the header is absent

    Raises:
        HTTPException: 400 if the header is not a version number,
            428 if the header is absent while versions are enforced
    """
    if if_match is None:
        if settings.STORE_ENFORCE_VERSION:
            raise HTTPException(
                status_code=status.HTTP_428_PRECONDITION_REQUIRED,
                detail="If-Match header with the record version is required",
            )
        return None

    value = if_match.strip()
    if value.startswith("W/"):
        value = value[2:]
    value = value.strip('"')
    if not value.isdigit():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid If-Match version: {if_match}",
        )
    return int(value)
