"""Pytest configuration and fixtures for Ungdoms tests."""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ungdoms.core.config import Settings, get_settings
from ungdoms.core.store import JsonStore
from ungdoms.main import app
from ungdoms.models.people import Client, Staff
from ungdoms.schemas.people import ClientCreate, StaffCreate
from ungdoms.services.people import ClientRepository, StaffRepository
from ungdoms.services.plans import CarePlanRepository, ImplementationPlanRepository
from ungdoms.services.reporting import (
    MonthlyReportRepository,
    VimsaTimeRepository,
    WeeklyDocumentationRepository,
)


# ============================================================================
# Store Fixtures
# ============================================================================

@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Backing file location inside the per-test temp directory."""
    return tmp_path / "data" / "store.json"


@pytest_asyncio.fixture
async def store(store_path: Path) -> JsonStore:
    """Fresh, loaded store isolated to this test."""
    store = JsonStore(store_path)
    await store.load()
    return store


# ============================================================================
# Repository Fixtures
# ============================================================================

@pytest.fixture
def staff_repo(store: JsonStore) -> StaffRepository:
    return StaffRepository(store)


@pytest.fixture
def client_repo(store: JsonStore) -> ClientRepository:
    return ClientRepository(store)


@pytest.fixture
def care_plan_repo(store: JsonStore) -> CarePlanRepository:
    return CarePlanRepository(store)


@pytest.fixture
def implementation_plan_repo(store: JsonStore) -> ImplementationPlanRepository:
    return ImplementationPlanRepository(store)


@pytest.fixture
def weekly_repo(store: JsonStore) -> WeeklyDocumentationRepository:
    return WeeklyDocumentationRepository(store)


@pytest.fixture
def monthly_repo(store: JsonStore) -> MonthlyReportRepository:
    return MonthlyReportRepository(store)


@pytest.fixture
def vimsa_repo(store: JsonStore) -> VimsaTimeRepository:
    return VimsaTimeRepository(store)


# ============================================================================
# Entity Fixtures
# ============================================================================

@pytest_asyncio.fixture
async def anna(staff_repo: StaffRepository) -> Staff:
    """Staff member Anna Svensson."""
    return await staff_repo.create(
        StaffCreate(name="Anna Svensson", initials="AS", role="behandlare")
    )


@pytest_asyncio.fixture
async def client_xy(client_repo: ClientRepository, anna: Staff) -> Client:
    """Client XY assigned to Anna."""
    return await client_repo.create(ClientCreate(initials="XY", staff_id=anna.id))


# ============================================================================
# HTTP Fixtures
# ============================================================================

@pytest.fixture
def override_settings():
    """
    Swap the settings seen by request dependencies.

    Usage:
        override_settings(STORE_ENFORCE_VERSION=True)
    """

    def _override(**values) -> Settings:
        overridden = get_settings().model_copy(update=values)
        app.dependency_overrides[get_settings] = lambda: overridden
        return overridden

    yield _override
    app.dependency_overrides.pop(get_settings, None)


@pytest_asyncio.fixture
async def http_client(store: JsonStore) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTP client bound to the app with the test store attached.

    The ASGI transport does not run the lifespan, so the store is attached
    to ``app.state`` directly.
    """
    app.state.store = store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.state.store = None
