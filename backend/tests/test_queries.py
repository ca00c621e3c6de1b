"""Tests for derived cross-entity queries."""

import pytest

from ungdoms.models.plans import ImplementationPlanStatus
from ungdoms.schemas.people import ClientCreate, ClientUpdate, StaffCreate
from ungdoms.schemas.plans import CarePlanCreate, ImplementationPlanCreate, ImplementationPlanUpdate
from ungdoms.schemas.reporting import (
    MonthlyReportCreate,
    VimsaTimeCreate,
    WeeklyDocumentationCreate,
)
from ungdoms.services import queries


# ============================================================================
# Care plans without GFP
# ============================================================================

@pytest.mark.asyncio
async def test_scenario_care_plan_leaves_missing_list_when_gfp_added(
    store, staff_repo, client_repo, care_plan_repo, implementation_plan_repo
):
    """Staff -> client -> care plan shows up as missing GFP until a GFP exists."""
    anna = await staff_repo.create(StaffCreate(name="Anna Svensson", initials="AS"))
    client = await client_repo.create(ClientCreate(staff_id=anna.id, initials="XY"))
    care_plan = await care_plan_repo.create(
        CarePlanCreate(client_id=client.id, staff_id=anna.id, status="received")
    )

    assert queries.care_plans_without_implementation_plan(store.state) == [care_plan]

    await implementation_plan_repo.create(
        ImplementationPlanCreate(client_id=client.id), acting_staff_id=anna.id
    )

    assert queries.care_plans_without_implementation_plan(store.state) == []


@pytest.mark.asyncio
async def test_missing_gfp_matches_on_client_only(
    store, client_repo, care_plan_repo, implementation_plan_repo, anna
):
    """A GFP for another client does not cover this client's care plan."""
    first = await client_repo.create(ClientCreate(initials="AA", staff_id=anna.id))
    second = await client_repo.create(ClientCreate(initials="BB", staff_id=anna.id))
    plan_first = await care_plan_repo.create(CarePlanCreate(client_id=first.id))
    await care_plan_repo.create(CarePlanCreate(client_id=second.id))
    await implementation_plan_repo.create(ImplementationPlanCreate(client_id=second.id))

    assert queries.care_plans_without_implementation_plan(store.state) == [plan_first]


@pytest.mark.asyncio
async def test_queries_do_not_mutate_state(store, care_plan_repo, client_xy):
    await care_plan_repo.create(CarePlanCreate(client_id=client_xy.id))
    before = store.dumps()

    queries.care_plans_without_implementation_plan(store.state)
    queries.incomplete_implementation_plans(store.state)
    queries.vimsa_discrepancies(store.state)
    queries.care_overview(store.state)

    assert store.dumps() == before


# ============================================================================
# Clients by staff
# ============================================================================

@pytest.mark.asyncio
async def test_clients_by_staff_filters_owner_and_deleted(store, staff_repo, client_repo, anna):
    bo = await staff_repo.create(StaffCreate(name="Bo Lind"))
    mine = await client_repo.create(ClientCreate(initials="AA", staff_id=anna.id))
    gone = await client_repo.create(ClientCreate(initials="BB", staff_id=anna.id))
    await client_repo.create(ClientCreate(initials="CC", staff_id=bo.id))
    await client_repo.remove(gone.id)

    result = queries.clients_by_staff(store.state, anna.id)

    assert [c.id for c in result] == [mine.id]
    assert all(c.staff_id == anna.id and c.deleted_at is None for c in result)


@pytest.mark.asyncio
async def test_reassigned_client_moves_between_staff(store, staff_repo, client_repo, anna, client_xy):
    bo = await staff_repo.create(StaffCreate(name="Bo Lind"))

    await client_repo.update(client_xy.id, ClientUpdate(staff_id=bo.id))

    assert queries.clients_by_staff(store.state, anna.id) == []
    assert [c.id for c in queries.clients_by_staff(store.state, bo.id)] == [client_xy.id]


# ============================================================================
# Incomplete GFPs
# ============================================================================

@pytest.mark.asyncio
async def test_incomplete_implementation_plans(store, implementation_plan_repo, client_xy):
    open_plan = await implementation_plan_repo.create(
        ImplementationPlanCreate(client_id=client_xy.id)
    )
    overdue = await implementation_plan_repo.create(
        ImplementationPlanCreate(client_id=client_xy.id, status=ImplementationPlanStatus.OVERDUE)
    )
    await implementation_plan_repo.create(
        ImplementationPlanCreate(client_id=client_xy.id, status=ImplementationPlanStatus.COMPLETED)
    )
    await implementation_plan_repo.create(
        ImplementationPlanCreate(client_id=client_xy.id, status=ImplementationPlanStatus.SENT)
    )
    inactive = await implementation_plan_repo.create(
        ImplementationPlanCreate(client_id=client_xy.id)
    )
    await implementation_plan_repo.update(inactive.id, ImplementationPlanUpdate(is_active=False))

    result = queries.incomplete_implementation_plans(store.state)

    assert [p.id for p in result] == [open_plan.id, overdue.id]


# ============================================================================
# Vimsa discrepancies and period lookups
# ============================================================================

@pytest.mark.asyncio
async def test_vimsa_discrepancies_pair_same_week_documentation(
    store, vimsa_repo, weekly_repo, client_xy
):
    doc = await weekly_repo.create(
        WeeklyDocumentationCreate(client_id=client_xy.id, year=2025, week=20)
    )
    await weekly_repo.create(WeeklyDocumentationCreate(client_id=client_xy.id, year=2025, week=21))
    flagged = await vimsa_repo.create(
        VimsaTimeCreate(client_id=client_xy.id, year=2025, week=20, hours_worked=10)
    )
    undocumented = await vimsa_repo.create(
        VimsaTimeCreate(client_id=client_xy.id, year=2025, week=30, hours_worked=4)
    )
    await vimsa_repo.create(
        VimsaTimeCreate(
            client_id=client_xy.id, year=2025, week=21, hours_worked=8, matches_documentation=True
        )
    )

    result = queries.vimsa_discrepancies(store.state)

    assert [d.vimsa_time.id for d in result] == [flagged.id, undocumented.id]
    assert [w.id for w in result[0].weekly_documentation] == [doc.id]
    assert result[1].weekly_documentation == []


@pytest.mark.asyncio
async def test_period_lookups_return_first_match(
    store, weekly_repo, monthly_repo, vimsa_repo, client_xy
):
    first = await weekly_repo.create(
        WeeklyDocumentationCreate(client_id=client_xy.id, year=2025, week=5)
    )
    await weekly_repo.create(WeeklyDocumentationCreate(client_id=client_xy.id, year=2025, week=5))
    report = await monthly_repo.create(MonthlyReportCreate(client_id=client_xy.id, year=2025, month=2))
    row = await vimsa_repo.create(VimsaTimeCreate(client_id=client_xy.id, year=2025, week=5))

    assert queries.find_weekly_documentation(store.state, client_xy.id, 2025, 5) == first
    assert queries.find_monthly_report(store.state, client_xy.id, 2025, 2) == report
    assert queries.find_vimsa_time(store.state, client_xy.id, 2025, 5) == row
    assert queries.find_weekly_documentation(store.state, client_xy.id, 2025, 6) is None
    assert queries.find_monthly_report(store.state, "c_other", 2025, 2) is None
    assert queries.find_vimsa_time(store.state, client_xy.id, 2024, 5) is None


# ============================================================================
# Staff search and overview
# ============================================================================

@pytest.mark.asyncio
async def test_search_staff_is_case_insensitive(store, staff_repo, anna):
    bo = await staff_repo.create(StaffCreate(name="Bo Lind", department="Familjeteam"))
    removed = await staff_repo.create(StaffCreate(name="Annika Berg"))
    await staff_repo.remove(removed.id)

    assert [s.id for s in queries.search_staff(store.state, "ANNA")] == [anna.id]
    assert [s.id for s in queries.search_staff(store.state, "familje")] == [bo.id]
    assert [s.id for s in queries.search_staff(store.state, "  ")] == [anna.id, bo.id]


@pytest.mark.asyncio
async def test_care_overview_counts(
    store, care_plan_repo, implementation_plan_repo, vimsa_repo, client_xy
):
    await care_plan_repo.create(CarePlanCreate(client_id=client_xy.id))
    await care_plan_repo.create(CarePlanCreate(client_id="c_other"))
    await implementation_plan_repo.create(ImplementationPlanCreate(client_id=client_xy.id))
    await vimsa_repo.create(VimsaTimeCreate(client_id=client_xy.id, year=2025, week=1))

    overview = queries.care_overview(store.state)

    assert overview.total_care_plans == 2
    assert overview.total_implementation_plans == 1
    assert overview.care_plans_without_implementation_plan == 1
    assert overview.incomplete_implementation_plans == 1
    assert overview.active_clients == 1
    assert overview.vimsa_discrepancies == 1
