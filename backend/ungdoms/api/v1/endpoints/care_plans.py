"""Care plan API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from ungdoms.api.dependencies import (
    StoreDep,
    get_acting_staff_id,
    get_care_plan_repository,
    get_expected_version,
)
from ungdoms.models.plans import CarePlan
from ungdoms.schemas.plans import CarePlanCreate, CarePlanUpdate
from ungdoms.services import queries
from ungdoms.services.plans import CarePlanRepository

router = APIRouter(prefix="/care-plans")

CarePlanRepo = Annotated[CarePlanRepository, Depends(get_care_plan_repository)]


def _not_found(care_plan_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Care plan {care_plan_id} not found",
    )


@router.get("/all", response_model=list[CarePlan], summary="List care plans")
async def list_care_plans(repo: CarePlanRepo) -> list[CarePlan]:
    return repo.list_all()


@router.get(
    "/missing-implementation-plan",
    response_model=list[CarePlan],
    summary="Care plans without a GFP",
)
async def list_care_plans_missing_implementation_plan(store: StoreDep) -> list[CarePlan]:
    """Care plans whose client has no implementation plan (GFP) yet."""
    return queries.care_plans_without_implementation_plan(store.state)


@router.get("/client/{client_id}", response_model=list[CarePlan], summary="Care plans of a client")
async def list_client_care_plans(client_id: str, repo: CarePlanRepo) -> list[CarePlan]:
    return repo.list_by_client(client_id)


@router.get("/staff/{staff_id}", response_model=list[CarePlan], summary="Care plans of a staff member")
async def list_staff_care_plans(staff_id: str, repo: CarePlanRepo) -> list[CarePlan]:
    return repo.list_by_staff(staff_id)


@router.get("/{care_plan_id}", response_model=CarePlan, summary="Get care plan")
async def get_care_plan(care_plan_id: str, repo: CarePlanRepo) -> CarePlan:
    care_plan = repo.get(care_plan_id)
    if care_plan is None:
        raise _not_found(care_plan_id)
    return care_plan


@router.post(
    "",
    response_model=CarePlan,
    status_code=status.HTTP_201_CREATED,
    summary="Register care plan",
)
async def create_care_plan(
    data: CarePlanCreate,
    repo: CarePlanRepo,
    acting_staff_id: Annotated[str, Depends(get_acting_staff_id)],
) -> CarePlan:
    """Register a received care plan; ``staffId`` defaults to the acting staff member."""
    return await repo.create(data, acting_staff_id)


@router.put("/{care_plan_id}", response_model=CarePlan, summary="Update care plan")
async def update_care_plan(
    care_plan_id: str,
    patch: CarePlanUpdate,
    repo: CarePlanRepo,
    expected_version: Annotated[int | None, Depends(get_expected_version)],
) -> CarePlan:
    """
    Apply a partial update.

    Response status codes:
    - 404: Care plan not found
    - 409: ``If-Match`` version is stale
    - 422: Backward status move while transitions are enforced
    """
    care_plan = await repo.update(care_plan_id, patch, expected_version)
    if care_plan is None:
        raise _not_found(care_plan_id)
    return care_plan


@router.delete("/{care_plan_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete care plan")
async def delete_care_plan(care_plan_id: str, repo: CarePlanRepo) -> None:
    if not await repo.remove(care_plan_id):
        raise _not_found(care_plan_id)
