"""Implementation plan (GFP) API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from ungdoms.api.dependencies import (
    StoreDep,
    get_acting_staff_id,
    get_expected_version,
    get_implementation_plan_repository,
)
from ungdoms.models.plans import ImplementationPlan
from ungdoms.schemas.plans import ImplementationPlanCreate, ImplementationPlanUpdate
from ungdoms.services import queries
from ungdoms.services.plans import ImplementationPlanRepository

router = APIRouter(prefix="/implementation-plans")

ImplementationPlanRepo = Annotated[
    ImplementationPlanRepository, Depends(get_implementation_plan_repository)
]


def _not_found(plan_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Implementation plan {plan_id} not found",
    )


@router.get("/all", response_model=list[ImplementationPlan], summary="List GFPs")
async def list_implementation_plans(repo: ImplementationPlanRepo) -> list[ImplementationPlan]:
    return repo.list_all()


@router.get("/incomplete", response_model=list[ImplementationPlan], summary="Incomplete GFPs")
async def list_incomplete_implementation_plans(store: StoreDep) -> list[ImplementationPlan]:
    """Active GFPs that are neither completed nor sent."""
    return queries.incomplete_implementation_plans(store.state)


@router.get(
    "/client/{client_id}",
    response_model=list[ImplementationPlan],
    summary="GFPs of a client",
)
async def list_client_implementation_plans(
    client_id: str, repo: ImplementationPlanRepo
) -> list[ImplementationPlan]:
    return repo.list_by_client(client_id)


@router.get(
    "/staff/{staff_id}",
    response_model=list[ImplementationPlan],
    summary="GFPs of a staff member",
)
async def list_staff_implementation_plans(
    staff_id: str, repo: ImplementationPlanRepo
) -> list[ImplementationPlan]:
    return repo.list_by_staff(staff_id)


@router.get(
    "/care-plan/{care_plan_id}",
    response_model=list[ImplementationPlan],
    summary="GFPs of a care plan",
)
async def list_care_plan_implementation_plans(
    care_plan_id: str, repo: ImplementationPlanRepo
) -> list[ImplementationPlan]:
    return repo.list_by_care_plan(care_plan_id)


@router.get("/{plan_id}", response_model=ImplementationPlan, summary="Get GFP")
async def get_implementation_plan(plan_id: str, repo: ImplementationPlanRepo) -> ImplementationPlan:
    plan = repo.get(plan_id)
    if plan is None:
        raise _not_found(plan_id)
    return plan


@router.post(
    "",
    response_model=ImplementationPlan,
    status_code=status.HTTP_201_CREATED,
    summary="Create GFP",
)
async def create_implementation_plan(
    data: ImplementationPlanCreate,
    repo: ImplementationPlanRepo,
    acting_staff_id: Annotated[str, Depends(get_acting_staff_id)],
) -> ImplementationPlan:
    """Create a GFP. ``carePlanId`` is optional and not checked against stored care plans."""
    return await repo.create(data, acting_staff_id)


@router.put("/{plan_id}", response_model=ImplementationPlan, summary="Update GFP")
async def update_implementation_plan(
    plan_id: str,
    patch: ImplementationPlanUpdate,
    repo: ImplementationPlanRepo,
    expected_version: Annotated[int | None, Depends(get_expected_version)],
) -> ImplementationPlan:
    plan = await repo.update(plan_id, patch, expected_version)
    if plan is None:
        raise _not_found(plan_id)
    return plan


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete GFP")
async def delete_implementation_plan(plan_id: str, repo: ImplementationPlanRepo) -> None:
    if not await repo.remove(plan_id):
        raise _not_found(plan_id)
