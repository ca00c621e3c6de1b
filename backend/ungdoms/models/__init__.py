"""Persisted entity models for the care administration store."""

from ungdoms.models.base import Record, SoftDeleteRecord
from ungdoms.models.people import Client, ClientStatus, Staff
from ungdoms.models.plans import (
    CarePlan,
    CarePlanStatus,
    ImplementationPlan,
    ImplementationPlanStatus,
)
from ungdoms.models.reporting import (
    MonthlyReport,
    MonthlyReportStatus,
    QualityAssessment,
    VimsaTime,
    WeeklyDocEntry,
    WeeklyDocumentation,
)
from ungdoms.models.state import StoreState

__all__ = [
    "Record",
    "SoftDeleteRecord",
    "Staff",
    "Client",
    "ClientStatus",
    "CarePlan",
    "CarePlanStatus",
    "ImplementationPlan",
    "ImplementationPlanStatus",
    "WeeklyDocumentation",
    "WeeklyDocEntry",
    "MonthlyReport",
    "MonthlyReportStatus",
    "QualityAssessment",
    "VimsaTime",
    "StoreState",
]
