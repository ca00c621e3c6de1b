"""Staff API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ungdoms.api.dependencies import (
    StoreDep,
    get_expected_version,
    get_staff_repository,
)
from ungdoms.models.people import Client, Staff
from ungdoms.schemas.people import StaffCreate, StaffUpdate
from ungdoms.services import queries
from ungdoms.services.people import StaffRepository

router = APIRouter(prefix="/staff")

StaffRepo = Annotated[StaffRepository, Depends(get_staff_repository)]


def _not_found(staff_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Staff {staff_id} not found",
    )


@router.get("", response_model=list[Staff], summary="List staff")
async def list_staff(
    repo: StaffRepo,
    include_deleted: Annotated[bool, Query(description="Include soft-deleted staff")] = False,
) -> list[Staff]:
    """List staff members in insertion order, hiding soft-deleted ones by default."""
    return repo.list_all(include_deleted=include_deleted)


@router.get("/search", response_model=list[Staff], summary="Search staff")
async def search_staff(
    store: StoreDep,
    q: Annotated[str, Query(max_length=100, description="Case-insensitive search text")] = "",
) -> list[Staff]:
    """Search non-deleted staff by name, initials, phone, email, role or department."""
    return queries.search_staff(store.state, q)


@router.get("/{staff_id}", response_model=Staff, summary="Get staff member")
async def get_staff(staff_id: str, repo: StaffRepo) -> Staff:
    """Get a staff member by id (soft-deleted staff are still returned)."""
    staff = repo.get(staff_id)
    if staff is None:
        raise _not_found(staff_id)
    return staff


@router.get("/{staff_id}/clients", response_model=list[Client], summary="Clients of a staff member")
async def list_staff_clients(staff_id: str, store: StoreDep) -> list[Client]:
    """Non-deleted clients assigned to the staff member."""
    return queries.clients_by_staff(store.state, staff_id)


@router.post(
    "",
    response_model=Staff,
    status_code=status.HTTP_201_CREATED,
    summary="Create staff member",
)
async def create_staff(data: StaffCreate, repo: StaffRepo) -> Staff:
    """Create a staff member; initials are derived from the name when omitted."""
    return await repo.create(data)


@router.put("/{staff_id}", response_model=Staff, summary="Update staff member")
async def update_staff(
    staff_id: str,
    patch: StaffUpdate,
    repo: StaffRepo,
    expected_version: Annotated[int | None, Depends(get_expected_version)],
) -> Staff:
    """Apply a partial update. Send ``If-Match: <version>`` to guard against lost updates."""
    staff = await repo.update(staff_id, patch, expected_version)
    if staff is None:
        raise _not_found(staff_id)
    return staff


@router.delete("/{staff_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Soft-delete staff member")
async def delete_staff(staff_id: str, repo: StaffRepo) -> None:
    """Soft delete: the record is hidden from listings but can be restored."""
    if not await repo.remove(staff_id):
        raise _not_found(staff_id)


@router.post("/{staff_id}/restore", response_model=Staff, summary="Restore staff member")
async def restore_staff(staff_id: str, repo: StaffRepo) -> Staff:
    """Clear the soft-delete stamp."""
    staff = await repo.restore(staff_id)
    if staff is None:
        raise _not_found(staff_id)
    return staff
