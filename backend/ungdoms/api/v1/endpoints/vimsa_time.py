"""Vimsa time API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from ungdoms.api.dependencies import (
    StoreDep,
    get_acting_staff_id,
    get_expected_version,
    get_vimsa_time_repository,
)
from ungdoms.models.reporting import VimsaTime
from ungdoms.schemas.queries import VimsaDiscrepancy
from ungdoms.schemas.reporting import VimsaTimeCreate, VimsaTimeUpdate
from ungdoms.services import queries
from ungdoms.services.reporting import VimsaTimeRepository

router = APIRouter(prefix="/vimsa-time")

VimsaRepo = Annotated[VimsaTimeRepository, Depends(get_vimsa_time_repository)]


def _not_found(vimsa_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Vimsa time {vimsa_id} not found",
    )


@router.get("/all", response_model=list[VimsaTime], summary="List Vimsa time")
async def list_vimsa_time(repo: VimsaRepo) -> list[VimsaTime]:
    return repo.list_all()


@router.get(
    "/discrepancies",
    response_model=list[VimsaDiscrepancy],
    summary="Vimsa time not matching documentation",
)
async def list_vimsa_discrepancies(store: StoreDep) -> list[VimsaDiscrepancy]:
    """Rows with ``matchesDocumentation`` false, each with the same-week documentation."""
    return queries.vimsa_discrepancies(store.state)


@router.get("/client/{client_id}", response_model=list[VimsaTime], summary="Vimsa time of a client")
async def list_client_vimsa_time(client_id: str, repo: VimsaRepo) -> list[VimsaTime]:
    return repo.list_by_client(client_id)


@router.get("/{vimsa_id}", response_model=VimsaTime, summary="Get Vimsa time")
async def get_vimsa_time(vimsa_id: str, repo: VimsaRepo) -> VimsaTime:
    row = repo.get(vimsa_id)
    if row is None:
        raise _not_found(vimsa_id)
    return row


@router.post(
    "",
    response_model=VimsaTime,
    status_code=status.HTTP_201_CREATED,
    summary="Register Vimsa time",
)
async def create_vimsa_time(
    data: VimsaTimeCreate,
    repo: VimsaRepo,
    acting_staff_id: Annotated[str, Depends(get_acting_staff_id)],
) -> VimsaTime:
    return await repo.create(data, acting_staff_id)


@router.put("/{vimsa_id}", response_model=VimsaTime, summary="Update Vimsa time")
async def update_vimsa_time(
    vimsa_id: str,
    patch: VimsaTimeUpdate,
    repo: VimsaRepo,
    expected_version: Annotated[int | None, Depends(get_expected_version)],
) -> VimsaTime:
    row = await repo.update(vimsa_id, patch, expected_version)
    if row is None:
        raise _not_found(vimsa_id)
    return row


@router.delete("/{vimsa_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Vimsa time")
async def delete_vimsa_time(vimsa_id: str, repo: VimsaRepo) -> None:
    if not await repo.remove(vimsa_id):
        raise _not_found(vimsa_id)
