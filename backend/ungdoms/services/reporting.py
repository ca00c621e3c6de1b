"""Weekly documentation, monthly report and Vimsa time repositories."""

import logging
from typing import Any

from ungdoms.models.base import next_timestamp, utcnow
from ungdoms.models.reporting import (
    MonthlyReport,
    VimsaTime,
    WeeklyDocEntry,
    WeeklyDocumentation,
)
from ungdoms.schemas.reporting import WeeklyDocEntryCreate, WeeklyDocEntryUpdate
from ungdoms.services.repository import EntityRepository, new_id

logger = logging.getLogger(__name__)


class WeeklyDocumentationRepository(EntityRepository[WeeklyDocumentation]):
    """
    Weekly documentation (hard delete) and its nested dated entries.

    Any change to an entry refreshes the parent's ``updatedAt`` and bumps its
    version, the same as a direct update of the parent.
    """

    collection = "weekly_documentation"
    model = WeeklyDocumentation
    id_prefix = "wd"
    entity_name = "WeeklyDocumentation"

    async def add_entry(self, doc_id: str, data: WeeklyDocEntryCreate) -> WeeklyDocEntry | None:
        """
        Append an entry to a weekly documentation record.

        Returns:
            The new entry, or None if the parent does not exist
        """
        if self.get(doc_id) is None:
            return None

        async with self.store.transaction(self.collection) as state:
            records = state.weekly_documentation
            index = self._index_of(records, doc_id)
            if index is None:
                return None
            parent = records[index]
            now = utcnow()
            entry = WeeklyDocEntry(
                **data.model_dump(), id=new_id("we"), created_at=now, updated_at=now
            )
            records[index] = self._bump(parent, {"entries": [*parent.entries, entry]})

        logger.info("Added weekly documentation entry", extra={"record_id": doc_id, "entry_id": entry.id})
        return entry

    async def update_entry(
        self, doc_id: str, entry_id: str, patch: WeeklyDocEntryUpdate
    ) -> WeeklyDocEntry | None:
        """
        Apply the fields set in ``patch`` to one entry.

        Returns:
            The updated entry, or None if the parent or entry does not exist
        """
        if self._entry_index(doc_id, entry_id) is None:
            return None

        changes: dict[str, Any] = patch.changes()
        async with self.store.transaction(self.collection) as state:
            records = state.weekly_documentation
            index = self._index_of(records, doc_id)
            if index is None:
                return None
            parent = records[index]
            position = self._index_of(parent.entries, entry_id)
            if position is None:
                return None
            current = parent.entries[position]
            entry = current.model_copy(
                update={**changes, "updated_at": next_timestamp(current.updated_at)}
            )
            entries = list(parent.entries)
            entries[position] = entry
            records[index] = self._bump(parent, {"entries": entries})

        logger.info("Updated weekly documentation entry", extra={"record_id": doc_id, "entry_id": entry_id})
        return entry

    async def remove_entry(self, doc_id: str, entry_id: str) -> bool:
        """
        Drop one entry.

        Returns:
            True if the entry was removed, False if the parent or entry does not exist
        """
        if self._entry_index(doc_id, entry_id) is None:
            return False

        async with self.store.transaction(self.collection) as state:
            records = state.weekly_documentation
            index = self._index_of(records, doc_id)
            if index is None:
                return False
            parent = records[index]
            entries = [e for e in parent.entries if e.id != entry_id]
            if len(entries) == len(parent.entries):
                return False
            records[index] = self._bump(parent, {"entries": entries})

        logger.info("Removed weekly documentation entry", extra={"record_id": doc_id, "entry_id": entry_id})
        return True

    def _entry_index(self, doc_id: str, entry_id: str) -> int | None:
        parent = self.get(doc_id)
        if parent is None:
            return None
        return self._index_of(parent.entries, entry_id)


class MonthlyReportRepository(EntityRepository[MonthlyReport]):
    """Monthly reports (hard delete)."""

    collection = "monthly_reports"
    model = MonthlyReport
    id_prefix = "mr"
    entity_name = "MonthlyReport"


class VimsaTimeRepository(EntityRepository[VimsaTime]):
    """Vimsa time rows (hard delete)."""

    collection = "vimsa_time"
    model = VimsaTime
    id_prefix = "vt"
    entity_name = "VimsaTime"
