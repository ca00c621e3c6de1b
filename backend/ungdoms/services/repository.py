"""Generic create/update/remove helpers over one store collection."""

import logging
import uuid
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from ungdoms.core.exceptions import VersionConflictError
from ungdoms.core.store import JsonStore
from ungdoms.models.base import Record, SoftDeleteRecord, next_timestamp, utcnow
from ungdoms.schemas.base import InputSchema, UpdateSchema
from ungdoms.services.workflow import check_transition

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=Record)
SoftRecordT = TypeVar("SoftRecordT", bound=SoftDeleteRecord)


def new_id(prefix: str) -> str:
    """Generate a prefixed record id, e.g. ``c_3f2a...``."""
    return f"{prefix}_{uuid.uuid4().hex}"


class EntityRepository(Generic[RecordT]):
    """
    Mutation helpers for one entity collection.

    Handles:
    - Id, timestamp and version assignment on create
    - Partial updates from a validated update schema (version +1)
    - Hard delete
    - Optional optimistic version check and forward-only status guard

    Lookups that miss return ``None`` (or ``False`` for ``remove``) and leave
    the collection untouched. Records are never modified in place; every
    mutation swaps in a new model instance so the store can roll back.
    """

    collection: ClassVar[str]
    model: ClassVar[type[Record]]
    id_prefix: ClassVar[str]
    entity_name: ClassVar[str]
    status_ranks: ClassVar[dict[Enum, int] | None] = None

    def __init__(self, store: JsonStore, enforce_status_transitions: bool = False) -> None:
        self.store = store
        self.enforce_status_transitions = enforce_status_transitions

    def _records(self) -> list[RecordT]:
        return getattr(self.store.state, self.collection)

    @staticmethod
    def _index_of(records: list[RecordT], record_id: str) -> int | None:
        for index, record in enumerate(records):
            if record.id == record_id:
                return index
        return None

    def list_all(self) -> list[RecordT]:
        """All records in insertion order."""
        return list(self._records())

    def get(self, record_id: str) -> RecordT | None:
        """Record by id, or None."""
        records = self._records()
        index = self._index_of(records, record_id)
        return records[index] if index is not None else None

    def list_by_client(self, client_id: str) -> list[RecordT]:
        """Records attached to a client."""
        return [r for r in self.list_all() if getattr(r, "client_id", None) == client_id]

    def list_by_staff(self, staff_id: str) -> list[RecordT]:
        """Records attributed to a staff member."""
        return [r for r in self.list_all() if getattr(r, "staff_id", None) == staff_id]

    async def create(self, data: InputSchema, acting_staff_id: str | None = None) -> RecordT:
        """
        Store a new record built from validated input.

        Args:
            data: Create schema for this entity
            acting_staff_id: Staff member used when the input omits ``staffId``

        Returns:
            The stored record

        Raises:
            StoreWriteError: If the flush fails (nothing is stored)
        """
        values: dict[str, Any] = data.model_dump()
        if "staff_id" in values and not values["staff_id"]:
            values["staff_id"] = acting_staff_id or ""

        now = utcnow()
        record = self.model(
            **values,
            id=new_id(self.id_prefix),
            created_at=now,
            updated_at=now,
            version=1,
        )
        async with self.store.transaction(self.collection) as state:
            getattr(state, self.collection).append(record)

        logger.info(f"Created {self.entity_name}", extra={"record_id": record.id})
        return record  # type: ignore[return-value]

    async def update(
        self,
        record_id: str,
        patch: UpdateSchema,
        expected_version: int | None = None,
    ) -> RecordT | None:
        """
        Apply the fields set in ``patch`` to a stored record.

        Args:
            record_id: Record to update
            patch: Update schema; only explicitly sent fields are applied
            expected_version: Version the caller last saw, checked when given

        Returns:
            The updated record, or None if no record has that id

        Raises:
            VersionConflictError: If ``expected_version`` is stale
            InvalidStatusTransitionError: If transitions are enforced and the
                status would move backwards
            StoreWriteError: If the flush fails (the record is unchanged)
        """
        if self.get(record_id) is None:
            return None

        changes = patch.changes()
        async with self.store.transaction(self.collection) as state:
            records = getattr(state, self.collection)
            index = self._index_of(records, record_id)
            if index is None:
                return None
            current = records[index]
            self._check_version(current, expected_version)
            if "status" in changes:
                self._check_status(current, changes["status"])

            updated = self._bump(current, changes)
            records[index] = updated

        logger.info(
            f"Updated {self.entity_name}",
            extra={"record_id": record_id, "record_version": updated.version, "fields": sorted(changes)},
        )
        return updated

    async def remove(self, record_id: str) -> bool:
        """
        Delete a record outright.

        Returns:
            True if a record was removed, False if no record has that id
        """
        if self.get(record_id) is None:
            return False

        async with self.store.transaction(self.collection) as state:
            records = getattr(state, self.collection)
            index = self._index_of(records, record_id)
            if index is None:
                return False
            del records[index]

        logger.info(f"Removed {self.entity_name}", extra={"record_id": record_id})
        return True

    def _bump(self, current: RecordT, changes: dict[str, Any]) -> RecordT:
        return current.model_copy(
            update={
                **changes,
                "updated_at": next_timestamp(current.updated_at),
                "version": current.version + 1,
            }
        )

    def _check_version(self, current: RecordT, expected_version: int | None) -> None:
        if expected_version is not None and expected_version != current.version:
            raise VersionConflictError(
                self.entity_name, current.id, expected_version, current.version
            )

    def _check_status(self, current: RecordT, requested: Enum) -> None:
        if self.enforce_status_transitions and self.status_ranks is not None:
            check_transition(
                self.entity_name, self.status_ranks, current.status, requested  # type: ignore[attr-defined]
            )


class SoftDeleteRepository(EntityRepository[SoftRecordT]):
    """
    Repository whose ``remove`` stamps ``deletedAt`` instead of dropping the row.

    Soft-deleted records are hidden from ``list_all()`` by default but stay
    addressable by id so they can be restored.
    """

    def list_all(self, include_deleted: bool = False) -> list[SoftRecordT]:
        """Records in insertion order, hiding soft-deleted ones unless asked."""
        records = list(self._records())
        if include_deleted:
            return records
        return [r for r in records if not r.is_deleted]

    async def remove(self, record_id: str) -> bool:
        """
        Soft delete: stamp ``deletedAt`` and bump the version.

        Returns:
            True if the record exists, False otherwise
        """
        return await self._set_deleted_at(record_id, deleted=True) is not None

    async def restore(self, record_id: str) -> SoftRecordT | None:
        """
        Clear ``deletedAt`` on a record.

        Returns:
            The restored record, or None if no record has that id
        """
        return await self._set_deleted_at(record_id, deleted=False)

    async def _set_deleted_at(self, record_id: str, deleted: bool) -> SoftRecordT | None:
        if self.get(record_id) is None:
            return None

        async with self.store.transaction(self.collection) as state:
            records = getattr(state, self.collection)
            index = self._index_of(records, record_id)
            if index is None:
                return None
            current = records[index]
            stamp = next_timestamp(current.updated_at)
            updated = current.model_copy(
                update={
                    "deleted_at": stamp if deleted else None,
                    "updated_at": stamp,
                    "version": current.version + 1,
                }
            )
            records[index] = updated

        action = "Soft-deleted" if deleted else "Restored"
        logger.info(f"{action} {self.entity_name}", extra={"record_id": record_id})
        return updated
