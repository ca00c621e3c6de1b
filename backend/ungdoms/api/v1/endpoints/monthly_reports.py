"""Monthly report API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ungdoms.api.dependencies import (
    StoreDep,
    get_acting_staff_id,
    get_expected_version,
    get_monthly_report_repository,
)
from ungdoms.models.reporting import MonthlyReport
from ungdoms.schemas.reporting import MonthlyReportCreate, MonthlyReportUpdate
from ungdoms.services import queries
from ungdoms.services.reporting import MonthlyReportRepository

router = APIRouter()

MonthlyRepo = Annotated[MonthlyReportRepository, Depends(get_monthly_report_repository)]


def _not_found(report_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Monthly report {report_id} not found",
    )


@router.get("/monthly-reports/all", response_model=list[MonthlyReport], summary="List monthly reports")
async def list_monthly_reports(repo: MonthlyRepo) -> list[MonthlyReport]:
    return repo.list_all()


@router.get(
    "/monthly-reports/client/{client_id}",
    response_model=list[MonthlyReport],
    summary="Monthly reports of a client",
)
async def list_client_monthly_reports(client_id: str, repo: MonthlyRepo) -> list[MonthlyReport]:
    return repo.list_by_client(client_id)


@router.get(
    "/clients/{client_id}/monthly/{year}/{month}",
    response_model=MonthlyReport,
    summary="Monthly report for a client and month",
)
async def get_client_month(
    client_id: str,
    year: Annotated[int, Path(ge=2000, le=2100)],
    month: Annotated[int, Path(ge=1, le=12)],
    store: StoreDep,
) -> MonthlyReport:
    report = queries.find_monthly_report(store.state, client_id, year, month)
    if report is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No monthly report for client {client_id} in {year}-{month:02d}",
        )
    return report


@router.get("/monthly-reports/{report_id}", response_model=MonthlyReport, summary="Get monthly report")
async def get_monthly_report(report_id: str, repo: MonthlyRepo) -> MonthlyReport:
    report = repo.get(report_id)
    if report is None:
        raise _not_found(report_id)
    return report


@router.post(
    "/monthly-reports",
    response_model=MonthlyReport,
    status_code=status.HTTP_201_CREATED,
    summary="Create monthly report",
)
async def create_monthly_report(
    data: MonthlyReportCreate,
    repo: MonthlyRepo,
    acting_staff_id: Annotated[str, Depends(get_acting_staff_id)],
) -> MonthlyReport:
    return await repo.create(data, acting_staff_id)


@router.put("/monthly-reports/{report_id}", response_model=MonthlyReport, summary="Update monthly report")
async def update_monthly_report(
    report_id: str,
    patch: MonthlyReportUpdate,
    repo: MonthlyRepo,
    expected_version: Annotated[int | None, Depends(get_expected_version)],
) -> MonthlyReport:
    report = await repo.update(report_id, patch, expected_version)
    if report is None:
        raise _not_found(report_id)
    return report


@router.delete(
    "/monthly-reports/{report_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete monthly report",
)
async def delete_monthly_report(report_id: str, repo: MonthlyRepo) -> None:
    if not await repo.remove(report_id):
        raise _not_found(report_id)
