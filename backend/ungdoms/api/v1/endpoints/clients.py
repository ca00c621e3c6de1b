"""Client API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ungdoms.api.dependencies import (
    get_acting_staff_id,
    get_client_repository,
    get_expected_version,
)
from ungdoms.models.people import Client
from ungdoms.schemas.people import ClientCreate, ClientUpdate
from ungdoms.services.people import ClientRepository

router = APIRouter(prefix="/clients")

ClientRepo = Annotated[ClientRepository, Depends(get_client_repository)]


def _not_found(client_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Client {client_id} not found",
    )


@router.get("/all", response_model=list[Client], summary="List clients")
async def list_clients(
    repo: ClientRepo,
    include_deleted: Annotated[bool, Query(description="Include soft-deleted clients")] = False,
) -> list[Client]:
    """List clients in insertion order, hiding soft-deleted ones by default."""
    return repo.list_all(include_deleted=include_deleted)


@router.get("/{client_id}", response_model=Client, summary="Get client")
async def get_client(client_id: str, repo: ClientRepo) -> Client:
    """Get a client by id (soft-deleted clients are still returned)."""
    client = repo.get(client_id)
    if client is None:
        raise _not_found(client_id)
    return client


@router.post(
    "",
    response_model=Client,
    status_code=status.HTTP_201_CREATED,
    summary="Create client",
)
async def create_client(
    data: ClientCreate,
    repo: ClientRepo,
    acting_staff_id: Annotated[str, Depends(get_acting_staff_id)],
) -> Client:
    """Create a client; ``staffId`` defaults to the acting staff member."""
    return await repo.create(data, acting_staff_id)


@router.put("/{client_id}", response_model=Client, summary="Update client")
async def update_client(
    client_id: str,
    patch: ClientUpdate,
    repo: ClientRepo,
    expected_version: Annotated[int | None, Depends(get_expected_version)],
) -> Client:
    """Apply a partial update. Send ``If-Match: <version>`` to guard against lost updates."""
    client = await repo.update(client_id, patch, expected_version)
    if client is None:
        raise _not_found(client_id)
    return client


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Soft-delete client")
async def delete_client(client_id: str, repo: ClientRepo) -> None:
    """Soft delete: the client is hidden from listings but can be restored."""
    if not await repo.remove(client_id):
        raise _not_found(client_id)


@router.post("/{client_id}/restore", response_model=Client, summary="Restore client")
async def restore_client(client_id: str, repo: ClientRepo) -> Client:
    """Clear the soft-delete stamp."""
    client = await repo.restore(client_id)
    if client is None:
        raise _not_found(client_id)
    return client
