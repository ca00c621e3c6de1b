"""Response schemas for derived cross-entity queries."""

from pydantic import Field

from ungdoms.models.base import CamelModel
from ungdoms.models.reporting import VimsaTime, WeeklyDocumentation


class VimsaDiscrepancy(CamelModel):
    """Vimsa time row not matching documentation, with the same-week documentation."""

    vimsa_time: VimsaTime
    weekly_documentation: list[WeeklyDocumentation] = Field(default_factory=list)


class CareOverview(CamelModel):
    """Counts behind the care overview page."""

    total_care_plans: int = Field(ge=0)
    total_implementation_plans: int = Field(ge=0)
    care_plans_without_implementation_plan: int = Field(ge=0)
    incomplete_implementation_plans: int = Field(ge=0)
    active_clients: int = Field(ge=0)
    vimsa_discrepancies: int = Field(ge=0)
