"""Care plan and implementation plan (GFP) repositories."""

from ungdoms.models.plans import CarePlan, ImplementationPlan
from ungdoms.services.repository import EntityRepository
from ungdoms.services.workflow import CARE_PLAN_STATUS_RANK, IMPLEMENTATION_PLAN_STATUS_RANK


class CarePlanRepository(EntityRepository[CarePlan]):
    """Care plans (hard delete)."""

    collection = "care_plans"
    model = CarePlan
    id_prefix = "cp"
    entity_name = "CarePlan"
    status_ranks = CARE_PLAN_STATUS_RANK

    def list_by_client(self, client_id: str) -> list[CarePlan]:
        """Care plans for a client, most recently updated first."""
        return sorted(super().list_by_client(client_id), key=lambda p: p.updated_at, reverse=True)


class ImplementationPlanRepository(EntityRepository[ImplementationPlan]):
    """
    Implementation plans (GFP, hard delete).

    ``carePlanId`` is a loose reference: it is stored as given and never
    checked against the care plan collection.
    """

    collection = "implementation_plans"
    model = ImplementationPlan
    id_prefix = "ip"
    entity_name = "ImplementationPlan"
    status_ranks = IMPLEMENTATION_PLAN_STATUS_RANK

    def list_by_care_plan(self, care_plan_id: str) -> list[ImplementationPlan]:
        """GFPs referencing a care plan."""
        return [p for p in self.list_all() if p.care_plan_id == care_plan_id]
