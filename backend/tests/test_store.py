"""Tests for the JSON document store.

These tests verify:
- Missing and corrupt files fall back to empty collections
- Invalid records are quarantined one by one; valid ones still load
- Documents from the previous app load with mapped statuses
- Load -> flush -> load is byte-for-byte stable
- Failed flushes raise and roll back in-memory state
- The legacy ``weeklyDocs`` key is folded into ``weeklyDocumentation``
"""

import asyncio
import json
import os

import pytest

from ungdoms.core.exceptions import StoreWriteError
from ungdoms.core.store import DEFAULT_STAFF, JsonStore
from ungdoms.models.base import utcnow
from ungdoms.models.people import Client
from ungdoms.models.plans import CarePlanStatus, ImplementationPlanStatus
from ungdoms.schemas.people import ClientCreate, ClientUpdate
from ungdoms.schemas.reporting import WeeklyDocEntryCreate, WeeklyDocumentationCreate
from ungdoms.services.people import ClientRepository


COLLECTION_KEYS = [
    "staff",
    "clients",
    "carePlans",
    "implementationPlans",
    "weeklyDocumentation",
    "monthlyReports",
    "vimsaTime",
]


# ============================================================================
# Load
# ============================================================================

@pytest.mark.asyncio
async def test_missing_file_creates_empty_document(store_path):
    """A missing file starts empty and writes a fresh document."""
    store = JsonStore(store_path)
    state = await store.load()

    assert state.counts() == {name: 0 for name in state.counts()}
    assert store_path.exists()
    on_disk = json.loads(store_path.read_text(encoding="utf-8"))
    assert list(on_disk) == COLLECTION_KEYS
    assert all(on_disk[key] == [] for key in COLLECTION_KEYS)


@pytest.mark.asyncio
async def test_fresh_store_can_seed_default_staff(store_path):
    """Seeding is opt-in and only applies to a fresh store."""
    store = JsonStore(store_path, seed_default_staff=True)
    state = await store.load()

    assert [s.id for s in state.staff] == [row[0] for row in DEFAULT_STAFF]
    assert all(s.version == 1 for s in state.staff)


@pytest.mark.asyncio
async def test_corrupt_file_is_backed_up_and_replaced(store_path):
    """Unparseable JSON is copied aside and the store starts empty."""
    store_path.parent.mkdir(parents=True)
    store_path.write_text("{not json", encoding="utf-8")

    store = JsonStore(store_path)
    state = await store.load()

    assert state.counts()["clients"] == 0
    backups = list(store_path.parent.glob("store.json.corrupt-*"))
    assert len(backups) == 1
    assert backups[0].read_text(encoding="utf-8") == "{not json"
    assert json.loads(store_path.read_text(encoding="utf-8"))["clients"] == []


@pytest.mark.asyncio
async def test_invalid_record_is_quarantined_and_others_survive(store_path):
    """A record missing required fields is dropped; the rest of the document loads."""
    now = utcnow().isoformat()
    store_path.parent.mkdir(parents=True)
    store_path.write_text(
        json.dumps(
            {
                "staff": [{"id": "s_1", "name": "Anna", "createdAt": now, "updatedAt": now}],
                "clients": [
                    {"initials": "XY"},
                    {"id": "c_1", "initials": "AB", "createdAt": now, "updatedAt": now},
                ],
            }
        ),
        encoding="utf-8",
    )

    state = await JsonStore(store_path).load()

    assert [s.id for s in state.staff] == ["s_1"]
    assert [c.id for c in state.clients] == ["c_1"]
    quarantined = list(store_path.parent.glob("store.json.quarantine-*"))
    assert len(quarantined) == 1
    assert "XY" in quarantined[0].read_text(encoding="utf-8")
    assert list(store_path.parent.glob("store.json.corrupt-*")) == []
    on_disk = json.loads(store_path.read_text(encoding="utf-8"))
    assert [c["id"] for c in on_disk["clients"]] == ["c_1"]


@pytest.mark.asyncio
async def test_non_list_collection_is_skipped(store_path):
    now = utcnow().isoformat()
    store_path.parent.mkdir(parents=True)
    store_path.write_text(
        json.dumps(
            {
                "staff": [{"id": "s_1", "name": "Anna", "createdAt": now, "updatedAt": now}],
                "clients": {"c_1": {}},
            }
        ),
        encoding="utf-8",
    )

    state = await JsonStore(store_path).load()

    assert [s.id for s in state.staff] == ["s_1"]
    assert state.clients == []


@pytest.mark.asyncio
async def test_invalid_utf8_is_treated_as_corrupt(store_path):
    """Bytes that are not UTF-8 do not stop the store from starting."""
    store_path.parent.mkdir(parents=True)
    store_path.write_bytes(b'{"clients": [\xff\xfe]}')

    state = await JsonStore(store_path).load()

    assert state.counts()["clients"] == 0
    backups = list(store_path.parent.glob("store.json.corrupt-*"))
    assert len(backups) == 1
    assert backups[0].read_bytes() == b'{"clients": [\xff\xfe]}'
    assert json.loads(store_path.read_text(encoding="utf-8"))["clients"] == []


@pytest.mark.asyncio
async def test_top_level_array_is_treated_as_corrupt(store_path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("[]", encoding="utf-8")

    state = await JsonStore(store_path).load()

    assert state.counts()["staff"] == 0
    assert len(list(store_path.parent.glob("store.json.corrupt-*"))) == 1


@pytest.mark.asyncio
async def test_document_from_previous_app_loads(store_path):
    """Legacy statuses map onto the current workflow and nothing is dropped."""
    now = "2025-03-01T09:00:00.000Z"
    store_path.parent.mkdir(parents=True)
    store_path.write_text(
        json.dumps(
            {
                "staff": [{"id": "s_1", "name": "Anna", "createdAt": now, "updatedAt": now}],
                "clients": [
                    {"id": "c_1", "initials": "XY", "staffId": "s_1", "createdAt": now, "updatedAt": now}
                ],
                "carePlans": [
                    {
                        "id": "Vx3kP0aQ",
                        "status": "active",
                        "version": 1,
                        "createdAt": now,
                        "updatedAt": now,
                        "clientId": "c_1",
                    }
                ],
                "implementationPlans": [
                    {
                        "id": "Rt9mZ2bW",
                        "status": "planned",
                        "version": 1,
                        "createdAt": now,
                        "updatedAt": now,
                        "clientId": "c_1",
                    }
                ],
            }
        ),
        encoding="utf-8",
    )

    state = await JsonStore(store_path).load()

    assert [c.id for c in state.clients] == ["c_1"]
    assert state.care_plans[0].status == CarePlanStatus.RECEIVED
    assert state.implementation_plans[0].status == ImplementationPlanStatus.PENDING
    assert list(store_path.parent.glob("store.json.quarantine-*")) == []


@pytest.mark.asyncio
async def test_legacy_weekly_entries_without_timestamps_load(store_path):
    """Entries stored as ``{id, ...fields}`` take their timestamps from the parent."""
    created = "2025-03-01T09:00:00.000Z"
    updated = "2025-03-02T10:00:00.000Z"
    store_path.parent.mkdir(parents=True)
    store_path.write_text(
        json.dumps(
            {
                "clients": [
                    {"id": "c_1", "initials": "XY", "createdAt": created, "updatedAt": created}
                ],
                "weeklyDocs": [
                    {
                        "id": "wd_1",
                        "clientId": "c_1",
                        "year": 2025,
                        "week": 9,
                        "createdAt": created,
                        "updatedAt": updated,
                        "entries": [{"id": "e1", "activities": "x"}],
                    }
                ],
            }
        ),
        encoding="utf-8",
    )

    state = await JsonStore(store_path).load()

    assert [c.id for c in state.clients] == ["c_1"]
    entry = state.weekly_documentation[0].entries[0]
    assert entry.id == "e1"
    assert entry.created_at == state.weekly_documentation[0].updated_at
    assert entry.updated_at == state.weekly_documentation[0].updated_at


@pytest.mark.asyncio
async def test_missing_keys_default_to_empty_and_unknown_fields_survive(store_path):
    """Partial documents load; fields this service does not know are kept."""
    now = utcnow().isoformat()
    store_path.parent.mkdir(parents=True)
    store_path.write_text(
        json.dumps(
            {
                "clients": [
                    {
                        "id": "c_1",
                        "initials": "XY",
                        "staffId": "s_1",
                        "createdAt": now,
                        "updatedAt": now,
                        "legacyFlag": True,
                    }
                ]
            }
        ),
        encoding="utf-8",
    )

    store = JsonStore(store_path)
    state = await store.load()

    assert state.staff == []
    assert state.clients[0].initials == "XY"
    assert state.clients[0].version == 1
    await store.flush()
    reloaded = json.loads(store_path.read_text(encoding="utf-8"))
    assert reloaded["clients"][0]["legacyFlag"] is True


@pytest.mark.asyncio
async def test_legacy_weekly_docs_are_merged(store_path):
    """Rows under ``weeklyDocs`` join ``weeklyDocumentation``; duplicate ids are skipped."""
    now = utcnow().isoformat()

    def doc(doc_id: str, week: int) -> dict:
        return {
            "id": doc_id,
            "clientId": "c_1",
            "year": 2025,
            "week": week,
            "createdAt": now,
            "updatedAt": now,
        }

    store_path.parent.mkdir(parents=True)
    store_path.write_text(
        json.dumps(
            {
                "weeklyDocumentation": [doc("wd_1", 1)],
                "weeklyDocs": [doc("wd_1", 1), doc("wd_2", 2)],
            }
        ),
        encoding="utf-8",
    )

    store = JsonStore(store_path)
    state = await store.load()

    assert [d.id for d in state.weekly_documentation] == ["wd_1", "wd_2"]
    await store.flush()
    assert "weeklyDocs" not in json.loads(store_path.read_text(encoding="utf-8"))


# ============================================================================
# Flush
# ============================================================================

@pytest.mark.asyncio
async def test_round_trip_is_byte_stable(store, store_path, anna, client_xy, weekly_repo):
    """load -> flush -> load yields identical JSON for an unmodified store."""
    doc = await weekly_repo.create(
        WeeklyDocumentationCreate(client_id=client_xy.id, year=2025, week=3, monday_documented=True)
    )
    await weekly_repo.add_entry(doc.id, WeeklyDocEntryCreate(activities="Samtal", hours=1.5))
    written = store_path.read_text(encoding="utf-8")

    reloaded = JsonStore(store_path)
    await reloaded.load()
    await reloaded.flush()

    assert store_path.read_text(encoding="utf-8") == written
    assert reloaded.dumps() == written


@pytest.mark.asyncio
async def test_write_leaves_no_temp_files(store, store_path, anna):
    """The atomic replace cleans up its temporary sibling."""
    leftovers = [p.name for p in store_path.parent.iterdir() if p.name != "store.json"]
    assert leftovers == []


@pytest.mark.asyncio
async def test_failed_flush_raises_and_rolls_back(store, store_path, anna, monkeypatch):
    """A write failure propagates and memory matches what is on disk."""
    before_disk = store_path.read_text(encoding="utf-8")
    repo = ClientRepository(store)

    def failing_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", failing_replace)

    with pytest.raises(StoreWriteError):
        await repo.create(ClientCreate(initials="ZZ", staff_id=anna.id))

    assert store.state.clients == []
    assert store_path.read_text(encoding="utf-8") == before_disk
    leftovers = [p.name for p in store_path.parent.iterdir() if p.name != "store.json"]
    assert leftovers == []


@pytest.mark.asyncio
async def test_failed_update_keeps_previous_record(store, client_xy, monkeypatch):
    """A failed flush during update restores the original record object."""
    repo = ClientRepository(store)

    def failing_write(payload):
        raise StoreWriteError("disk full")

    monkeypatch.setattr(store, "_write", failing_write)

    with pytest.raises(StoreWriteError):
        await repo.update(client_xy.id, ClientUpdate(notes="ny anteckning"))

    assert repo.get(client_xy.id) is client_xy
    assert repo.get(client_xy.id).version == 1


@pytest.mark.asyncio
async def test_transaction_rejects_unknown_collection(store):
    with pytest.raises(ValueError):
        async with store.transaction("patients"):
            pass


@pytest.mark.asyncio
async def test_transaction_rolls_back_on_error(store, client_xy):
    """An exception inside the body restores the collection."""
    with pytest.raises(RuntimeError):
        async with store.transaction("clients") as state:
            state.clients.append(client_xy.model_copy(update={"id": "c_other"}))
            raise RuntimeError("boom")

    assert [c.id for c in store.state.clients] == [client_xy.id]


@pytest.mark.asyncio
async def test_snapshot_is_independent_copy(store, client_xy):
    snapshot = store.snapshot()
    snapshot.clients.clear()

    assert len(store.state.clients) == 1
    assert isinstance(snapshot.clients, list)
    assert isinstance(store.state.clients[0], Client)


# ============================================================================
# Single writer
# ============================================================================

@pytest.mark.asyncio
async def test_concurrent_updates_are_serialized(store, store_path, client_xy):
    """Every concurrent update lands exactly once and disk matches memory."""
    repo = ClientRepository(store)

    results = await asyncio.gather(
        *(repo.update(client_xy.id, ClientUpdate(notes=f"anteckning {i}")) for i in range(20))
    )

    assert sorted(r.version for r in results) == list(range(2, 22))
    assert repo.get(client_xy.id).version == 21
    assert store_path.read_text(encoding="utf-8") == store.dumps()


@pytest.mark.asyncio
async def test_concurrent_creates_keep_every_record(store, store_path, anna):
    repo = ClientRepository(store)

    created = await asyncio.gather(
        *(repo.create(ClientCreate(initials=f"K{i}", staff_id=anna.id)) for i in range(20))
    )

    ids = [c.id for c in store.state.clients]
    assert len(ids) == 20
    assert len(set(ids)) == 20
    assert set(ids) == {c.id for c in created}
    on_disk = json.loads(store_path.read_text(encoding="utf-8"))
    assert [c["id"] for c in on_disk["clients"]] == ids
