"""Pydantic schemas for request/response validation."""

from ungdoms.schemas.health import HealthCheckResponse, HealthStatus, ServiceHealth
from ungdoms.schemas.people import ClientCreate, ClientUpdate, StaffCreate, StaffUpdate
from ungdoms.schemas.plans import (
    CarePlanCreate,
    CarePlanUpdate,
    ImplementationPlanCreate,
    ImplementationPlanUpdate,
)
from ungdoms.schemas.queries import CareOverview, VimsaDiscrepancy
from ungdoms.schemas.reporting import (
    MonthlyReportCreate,
    MonthlyReportUpdate,
    VimsaTimeCreate,
    VimsaTimeUpdate,
    WeeklyDocEntryCreate,
    WeeklyDocEntryUpdate,
    WeeklyDocumentationCreate,
    WeeklyDocumentationUpdate,
)

__all__ = [
    "HealthCheckResponse",
    "HealthStatus",
    "ServiceHealth",
    "StaffCreate",
    "StaffUpdate",
    "ClientCreate",
    "ClientUpdate",
    "CarePlanCreate",
    "CarePlanUpdate",
    "ImplementationPlanCreate",
    "ImplementationPlanUpdate",
    "WeeklyDocumentationCreate",
    "WeeklyDocumentationUpdate",
    "WeeklyDocEntryCreate",
    "WeeklyDocEntryUpdate",
    "MonthlyReportCreate",
    "MonthlyReportUpdate",
    "VimsaTimeCreate",
    "VimsaTimeUpdate",
    "CareOverview",
    "VimsaDiscrepancy",
]
