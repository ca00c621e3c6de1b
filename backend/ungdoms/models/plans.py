"""Care plan (vårdplan) and implementation plan (GFP) models."""

from enum import Enum
from typing import Any, Optional

from pydantic import field_validator

from ungdoms.models.base import OptionalDate, Record


class CarePlanStatus(str, Enum):
    """Care plan workflow: received -> staff_notified -> in_progress -> completed."""

    RECEIVED = "received"  # Plan received from the social services
    STAFF_NOTIFIED = "staff_notified"  # Responsible staff informed
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ImplementationPlanStatus(str, Enum):
    """GFP workflow: pending -> in_progress -> completed, with sent/overdue alternates."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    SENT = "sent"  # Sent to the commissioning authority
    OVERDUE = "overdue"


# Status values written by the previous app, mapped onto the current workflow
LEGACY_CARE_PLAN_STATUS = {"active": CarePlanStatus.RECEIVED.value}
LEGACY_IMPLEMENTATION_PLAN_STATUS = {"planned": ImplementationPlanStatus.PENDING.value}


class CarePlan(Record):
    """
    Care plan (vårdplan) received for a client.

    ``staffId`` is the creator; ``responsibleId`` optionally names a different
    responsible staff member.
    """

    client_id: str = ""
    staff_id: str = ""
    responsible_id: Optional[str] = None
    plan_content: str = ""
    goals: str = ""
    interventions: str = ""
    evaluation_criteria: Optional[str] = None
    received_date: OptionalDate = None
    entered_journal_date: OptionalDate = None
    staff_notified_date: OptionalDate = None
    status: CarePlanStatus = CarePlanStatus.RECEIVED
    is_active: bool = True
    comment: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def map_legacy_status(cls, v: Any) -> Any:
        if isinstance(v, str):
            return LEGACY_CARE_PLAN_STATUS.get(v, v)
        return v

    def __repr__(self) -> str:
        return f"<CarePlan id={self.id} client_id={self.client_id} status={self.status.value}>"


class ImplementationPlan(Record):
    """
    Implementation plan (genomförandeplan, GFP).

    ``carePlanId`` is a logical link only; a GFP may exist without it and
    nothing checks that the referenced care plan exists.
    """

    client_id: str = ""
    staff_id: str = ""
    care_plan_id: Optional[str] = None
    plan_ref: str = ""
    plan_type: str = "care"
    plan_content: str = ""
    goals: str = ""
    activities: str = ""
    follow_up_schedule: str = ""
    followup1: bool = False
    followup2: bool = False
    followup3: bool = False
    followup4: bool = False
    followup5: bool = False
    followup6: bool = False
    due_date: OptionalDate = None
    sent_date: OptionalDate = None
    completed_date: OptionalDate = None
    status: ImplementationPlanStatus = ImplementationPlanStatus.PENDING
    is_active: bool = True
    comments: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def map_legacy_status(cls, v: Any) -> Any:
        if isinstance(v, str):
            return LEGACY_IMPLEMENTATION_PLAN_STATUS.get(v, v)
        return v

    @property
    def followups(self) -> list[bool]:
        """Follow-up flags 1..6 in order."""
        return [
            self.followup1,
            self.followup2,
            self.followup3,
            self.followup4,
            self.followup5,
            self.followup6,
        ]

    def __repr__(self) -> str:
        return f"<ImplementationPlan id={self.id} client_id={self.client_id} status={self.status.value}>"
