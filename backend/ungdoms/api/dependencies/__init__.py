"""API dependencies."""

from ungdoms.api.dependencies.auth import get_acting_staff_id
from ungdoms.api.dependencies.store import (
    StoreDep,
    get_care_plan_repository,
    get_client_repository,
    get_expected_version,
    get_implementation_plan_repository,
    get_monthly_report_repository,
    get_staff_repository,
    get_store,
    get_vimsa_time_repository,
    get_weekly_documentation_repository,
)

__all__ = [
    "StoreDep",
    "get_acting_staff_id",
    "get_store",
    "get_expected_version",
    "get_staff_repository",
    "get_client_repository",
    "get_care_plan_repository",
    "get_implementation_plan_repository",
    "get_weekly_documentation_repository",
    "get_monthly_report_repository",
    "get_vimsa_time_repository",
]
