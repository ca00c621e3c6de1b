"""JSON document store with write-through persistence and a single writer."""

import asyncio
import json
import logging
import os
import shutil
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from ungdoms.core.exceptions import StoreError, StoreWriteError
from ungdoms.models.base import utcnow
from ungdoms.models.people import Staff
from ungdoms.models.state import COLLECTIONS, StoreState

logger = logging.getLogger(__name__)

DEFAULT_STAFF = (
    ("s_demo", "Demo Personal", "DP"),
    ("staff_default_1", "Anna Behandlare", "AB"),
    ("staff_default_2", "Björn Behandlare", "BB"),
    ("staff_default_3", "Carina Behandlare", "CB"),
)


class JsonStore:
    """
    Authoritative in-memory copy of every entity collection, mirrored to a
    single JSON document on disk.

    Handles:
    - Loading (missing or corrupt documents fall back to empty collections)
    - Write-through flushes after every mutation, awaited by the caller
    - Single-writer locking and in-memory rollback when a flush fails

    Reads go straight to ``state`` without taking the lock. Mutations must
    happen inside ``transaction()`` and must replace records rather than
    modify them in place, so a shallow snapshot of a collection is enough to
    roll it back.
    """

    def __init__(self, path: Path | str, seed_default_staff: bool = False) -> None:
        self.path = Path(path)
        self.seed_default_staff = seed_default_staff
        self.state = StoreState()
        self._lock = asyncio.Lock()

    async def load(self) -> StoreState:
        """
        Read the backing document into memory.

        A missing file starts an empty store and writes a fresh document.
        A file that is not UTF-8 encoded JSON with an object at the top is
        copied aside as ``<name>.corrupt-<timestamp>`` before the store
        starts empty. Records that do not match their model are dropped one
        by one; the file is first copied aside as
        ``<name>.quarantine-<timestamp>`` so they can be recovered. In both
        cases the cleaned state is written back to the original path.

        Returns:
            The loaded state

        Raises:
            StoreError: If the file exists but cannot be read
            StoreWriteError: If the fresh document cannot be written
        """

        def _read() -> bytes | None:
            if not self.path.exists():
                return None
            return self.path.read_bytes()

        try:
            raw = await asyncio.to_thread(_read)
        except OSError as e:
            logger.error(f"Failed to read store file {self.path}: {e}")
            raise StoreError(f"Failed to read store file {self.path}: {e}") from e

        if raw is None:
            logger.info(f"Store file not found, creating {self.path}")
            self.state = self._fresh_state()
            await self._flush_locked()
            return self.state

        try:
            document = json.loads(raw.decode("utf-8"))
        except ValueError as e:
            document = None
            reason = str(e)
        else:
            reason = "top-level value is not an object"

        if not isinstance(document, dict):
            backup = await asyncio.to_thread(self._backup_file, "corrupt")
            logger.error(
                "Store file is corrupt, starting with empty collections",
                extra={
                    "path": str(self.path),
                    "backup": str(backup) if backup else None,
                    "reason": reason,
                },
            )
            self.state = self._fresh_state()
            await self._flush_locked()
            return self.state

        self.state, rejected = StoreState.from_document(document)
        if rejected:
            backup = await asyncio.to_thread(self._backup_file, "quarantine")
            for entry in rejected:
                logger.error(
                    "Quarantined invalid store record",
                    extra={
                        "path": str(self.path),
                        "backup": str(backup) if backup else None,
                        "collection": entry["collection"],
                        "record_id": entry["id"],
                        "errors": entry["errors"],
                    },
                )
            await self._flush_locked()

        logger.info("Loaded store", extra={"path": str(self.path), **self.state.counts()})
        return self.state

    async def flush(self) -> None:
        """
        Write the whole state to disk, taking the writer lock.

        Raises:
            StoreWriteError: If the write fails
        """
        async with self._lock:
            await self._flush_locked()

    @asynccontextmanager
    async def transaction(self, *collections: str) -> AsyncGenerator[StoreState, None]:
        """
        Exclusive read-modify-write over the named collections, then flush.

        Usage:
            async with store.transaction("clients") as state:
                state.clients.append(client)

        If the body or the flush raises, the named collections are restored
        to their contents at entry and the exception propagates.

        Args:
            collections: Collection attribute names the body will mutate

        Yields:
            The live store state

        Raises:
            StoreWriteError: If the flush fails
        """
        unknown = set(collections) - COLLECTIONS.keys()
        if unknown:
            raise ValueError(f"Unknown collections: {sorted(unknown)}")

        async with self._lock:
            snapshot = {name: list(getattr(self.state, name)) for name in collections}
            try:
                yield self.state
                await self._flush_locked()
            except Exception:
                for name, items in snapshot.items():
                    getattr(self.state, name)[:] = items
                logger.warning("Rolled back in-memory changes", extra={"collections": list(collections)})
                raise

    def snapshot(self) -> StoreState:
        """Deep copy of the current state."""
        return self.state.model_copy(deep=True)

    def dumps(self) -> str:
        """Serialize the state exactly as it is written to disk."""
        return self.state.model_dump_json(by_alias=True, indent=2) + "\n"

    async def _flush_locked(self) -> None:
        payload = self.dumps()
        await asyncio.to_thread(self._write, payload)
        logger.debug("Store flushed", extra={"path": str(self.path), "bytes": len(payload)})

    def _write(self, payload: str) -> None:
        """Atomically replace the backing file (sync, runs in a worker thread)."""
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error(f"Failed to write store file {self.path}: {e}")
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StoreWriteError(f"Failed to write store file {self.path}: {e}") from e

    def _backup_file(self, label: str) -> Path | None:
        backup = self.path.with_name(
            f"{self.path.name}.{label}-{utcnow().strftime('%Y%m%dT%H%M%S%fZ')}"
        )
        try:
            shutil.copy2(self.path, backup)
        except OSError as e:
            logger.error(f"Failed to back up store file {self.path}: {e}")
            return None
        return backup

    def _fresh_state(self) -> StoreState:
        state = StoreState()
        if self.seed_default_staff:
            now = utcnow()
            state.staff = [
                Staff(
                    id=staff_id,
                    name=name,
                    initials=initials,
                    role="behandlare",
                    created_at=now,
                    updated_at=now,
                )
                for staff_id, name, initials in DEFAULT_STAFF
            ]
        return state
