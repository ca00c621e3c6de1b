"""Weekly documentation API endpoints, including nested entries."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ungdoms.api.dependencies import (
    StoreDep,
    get_acting_staff_id,
    get_expected_version,
    get_weekly_documentation_repository,
)
from ungdoms.models.reporting import WeeklyDocEntry, WeeklyDocumentation
from ungdoms.schemas.reporting import (
    WeeklyDocEntryCreate,
    WeeklyDocEntryUpdate,
    WeeklyDocumentationCreate,
    WeeklyDocumentationUpdate,
)
from ungdoms.services import queries
from ungdoms.services.reporting import WeeklyDocumentationRepository

router = APIRouter()

WeeklyRepo = Annotated[WeeklyDocumentationRepository, Depends(get_weekly_documentation_repository)]


def _not_found(doc_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Weekly documentation {doc_id} not found",
    )


def _entry_not_found(doc_id: str, entry_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Entry {entry_id} not found in weekly documentation {doc_id}",
    )


@router.get(
    "/weekly-documentation/all",
    response_model=list[WeeklyDocumentation],
    summary="List weekly documentation",
)
async def list_weekly_documentation(repo: WeeklyRepo) -> list[WeeklyDocumentation]:
    return repo.list_all()


@router.get(
    "/weekly-documentation/client/{client_id}",
    response_model=list[WeeklyDocumentation],
    summary="Weekly documentation of a client",
)
async def list_client_weekly_documentation(
    client_id: str, repo: WeeklyRepo
) -> list[WeeklyDocumentation]:
    return repo.list_by_client(client_id)


@router.get(
    "/clients/{client_id}/weekly/{year}/{week}",
    response_model=WeeklyDocumentation,
    summary="Weekly documentation for a client and week",
)
async def get_client_week(
    client_id: str,
    year: Annotated[int, Path(ge=2000, le=2100)],
    week: Annotated[int, Path(ge=1, le=53)],
    store: StoreDep,
) -> WeeklyDocumentation:
    """First weekly documentation recorded for the client's ISO week."""
    doc = queries.find_weekly_documentation(store.state, client_id, year, week)
    if doc is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No weekly documentation for client {client_id} in {year}-W{week:02d}",
        )
    return doc


@router.get(
    "/weekly-documentation/{doc_id}",
    response_model=WeeklyDocumentation,
    summary="Get weekly documentation",
)
async def get_weekly_documentation(doc_id: str, repo: WeeklyRepo) -> WeeklyDocumentation:
    doc = repo.get(doc_id)
    if doc is None:
        raise _not_found(doc_id)
    return doc


@router.post(
    "/weekly-documentation",
    response_model=WeeklyDocumentation,
    status_code=status.HTTP_201_CREATED,
    summary="Create weekly documentation",
)
async def create_weekly_documentation(
    data: WeeklyDocumentationCreate,
    repo: WeeklyRepo,
    acting_staff_id: Annotated[str, Depends(get_acting_staff_id)],
) -> WeeklyDocumentation:
    """Create weekly documentation. Several records for the same week are allowed."""
    return await repo.create(data, acting_staff_id)


@router.put(
    "/weekly-documentation/{doc_id}",
    response_model=WeeklyDocumentation,
    summary="Update weekly documentation",
)
async def update_weekly_documentation(
    doc_id: str,
    patch: WeeklyDocumentationUpdate,
    repo: WeeklyRepo,
    expected_version: Annotated[int | None, Depends(get_expected_version)],
) -> WeeklyDocumentation:
    doc = await repo.update(doc_id, patch, expected_version)
    if doc is None:
        raise _not_found(doc_id)
    return doc


@router.delete(
    "/weekly-documentation/{doc_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete weekly documentation",
)
async def delete_weekly_documentation(doc_id: str, repo: WeeklyRepo) -> None:
    if not await repo.remove(doc_id):
        raise _not_found(doc_id)


@router.post(
    "/weekly-documentation/{doc_id}/entries",
    response_model=WeeklyDocEntry,
    status_code=status.HTTP_201_CREATED,
    summary="Add entry",
)
async def add_weekly_documentation_entry(
    doc_id: str, data: WeeklyDocEntryCreate, repo: WeeklyRepo
) -> WeeklyDocEntry:
    entry = await repo.add_entry(doc_id, data)
    if entry is None:
        raise _not_found(doc_id)
    return entry


@router.put(
    "/weekly-documentation/{doc_id}/entries/{entry_id}",
    response_model=WeeklyDocEntry,
    summary="Update entry",
)
async def update_weekly_documentation_entry(
    doc_id: str, entry_id: str, patch: WeeklyDocEntryUpdate, repo: WeeklyRepo
) -> WeeklyDocEntry:
    entry = await repo.update_entry(doc_id, entry_id, patch)
    if entry is None:
        raise _entry_not_found(doc_id, entry_id)
    return entry


@router.delete(
    "/weekly-documentation/{doc_id}/entries/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove entry",
)
async def delete_weekly_documentation_entry(doc_id: str, entry_id: str, repo: WeeklyRepo) -> None:
    if not await repo.remove_entry(doc_id, entry_id):
        raise _entry_not_found(doc_id, entry_id)
