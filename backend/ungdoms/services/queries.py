"""Derived cross-entity queries.

Every function is pure: it reads the given state, never mutates it, and
recomputes its answer on each call.
"""

from ungdoms.models.people import Client, ClientStatus, Staff
from ungdoms.models.plans import CarePlan, ImplementationPlan, ImplementationPlanStatus
from ungdoms.models.reporting import MonthlyReport, VimsaTime, WeeklyDocumentation
from ungdoms.models.state import StoreState
from ungdoms.schemas.queries import CareOverview, VimsaDiscrepancy

TERMINAL_IMPLEMENTATION_PLAN_STATUSES = frozenset(
    {ImplementationPlanStatus.COMPLETED, ImplementationPlanStatus.SENT}
)

STAFF_SEARCH_FIELDS = ("name", "initials", "phone", "email", "role", "department")


def clients_by_staff(state: StoreState, staff_id: str) -> list[Client]:
    """Non-deleted clients assigned to a staff member."""
    return [c for c in state.clients if c.staff_id == staff_id and not c.is_deleted]


def care_plans_without_implementation_plan(state: StoreState) -> list[CarePlan]:
    """Care plans whose client has no GFP at all."""
    covered = {plan.client_id for plan in state.implementation_plans}
    return [cp for cp in state.care_plans if cp.client_id not in covered]


def incomplete_implementation_plans(state: StoreState) -> list[ImplementationPlan]:
    """Active GFPs that have not reached a terminal status."""
    return [
        plan
        for plan in state.implementation_plans
        if plan.is_active and plan.status not in TERMINAL_IMPLEMENTATION_PLAN_STATUSES
    ]


def vimsa_discrepancies(state: StoreState) -> list[VimsaDiscrepancy]:
    """
    Vimsa time rows flagged as not matching the documentation.

    Each row is paired with the weekly documentation of the same client, year
    and week; the list is empty when nothing was documented that week.
    """
    result = []
    for row in state.vimsa_time:
        if row.matches_documentation:
            continue
        docs = [
            doc
            for doc in state.weekly_documentation
            if doc.client_id == row.client_id and doc.year == row.year and doc.week == row.week
        ]
        result.append(VimsaDiscrepancy(vimsa_time=row, weekly_documentation=docs))
    return result


def find_weekly_documentation(
    state: StoreState, client_id: str, year: int, week: int
) -> WeeklyDocumentation | None:
    """First weekly documentation for a client and ISO week."""
    return next(
        (
            doc
            for doc in state.weekly_documentation
            if doc.client_id == client_id and doc.year == year and doc.week == week
        ),
        None,
    )


def find_monthly_report(
    state: StoreState, client_id: str, year: int, month: int
) -> MonthlyReport | None:
    """First monthly report for a client and month."""
    return next(
        (
            report
            for report in state.monthly_reports
            if report.client_id == client_id and report.year == year and report.month == month
        ),
        None,
    )


def find_vimsa_time(state: StoreState, client_id: str, year: int, week: int) -> VimsaTime | None:
    """First Vimsa time row for a client and ISO week."""
    return next(
        (
            row
            for row in state.vimsa_time
            if row.client_id == client_id and row.year == year and row.week == week
        ),
        None,
    )


def search_staff(state: StoreState, query: str) -> list[Staff]:
    """Non-deleted staff matching ``query`` (case-insensitive substring)."""
    needle = query.strip().casefold()
    staff = [s for s in state.staff if not s.is_deleted]
    if not needle:
        return staff
    return [
        s
        for s in staff
        if any(needle in getattr(s, field).casefold() for field in STAFF_SEARCH_FIELDS)
    ]


def care_overview(state: StoreState) -> CareOverview:
    """Counts shown on the care overview page."""
    return CareOverview(
        total_care_plans=len(state.care_plans),
        total_implementation_plans=len(state.implementation_plans),
        care_plans_without_implementation_plan=len(care_plans_without_implementation_plan(state)),
        incomplete_implementation_plans=len(incomplete_implementation_plans(state)),
        active_clients=sum(
            1 for c in state.clients if not c.is_deleted and c.status == ClientStatus.ACTIVE
        ),
        vimsa_discrepancies=sum(1 for row in state.vimsa_time if not row.matches_documentation),
    )
