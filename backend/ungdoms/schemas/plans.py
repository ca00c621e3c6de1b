"""Pydantic schemas for care plan and implementation plan (GFP) API."""

from typing import Optional

from pydantic import Field

from ungdoms.models.base import OptionalDate
from ungdoms.models.plans import CarePlanStatus, ImplementationPlanStatus
from ungdoms.schemas.base import InputSchema, UpdateSchema


class CarePlanCreate(InputSchema):
    """Schema for registering a received care plan."""

    client_id: str = Field(..., min_length=1, description="Client the plan belongs to")
    staff_id: Optional[str] = Field(None, description="Defaults to the acting staff member")
    responsible_id: Optional[str] = Field(None, description="Responsible staff, if not the creator")
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


class CarePlanUpdate(UpdateSchema):
    """Schema for updating a care plan (all fields optional)."""

    NULLABLE = frozenset(
        {
            "responsible_id",
            "evaluation_criteria",
            "received_date",
            "entered_journal_date",
            "staff_notified_date",
        }
    )

    client_id: Optional[str] = Field(None, min_length=1)
    staff_id: Optional[str] = Field(None, min_length=1)
    responsible_id: Optional[str] = None
    plan_content: Optional[str] = None
    goals: Optional[str] = None
    interventions: Optional[str] = None
    evaluation_criteria: Optional[str] = None
    received_date: OptionalDate = None
    entered_journal_date: OptionalDate = None
    staff_notified_date: OptionalDate = None
    status: Optional[CarePlanStatus] = None
    is_active: Optional[bool] = None
    comment: Optional[str] = None


class ImplementationPlanCreate(InputSchema):
    """Schema for creating a GFP. ``carePlanId`` is optional and not checked."""

    client_id: str = Field(..., min_length=1, description="Client the plan belongs to")
    staff_id: Optional[str] = Field(None, description="Defaults to the acting staff member")
    care_plan_id: Optional[str] = Field(None, description="Care plan this GFP implements")
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


class ImplementationPlanUpdate(UpdateSchema):
    """Schema for updating a GFP (all fields optional)."""

    NULLABLE = frozenset({"care_plan_id", "due_date", "sent_date", "completed_date"})

    client_id: Optional[str] = Field(None, min_length=1)
    staff_id: Optional[str] = Field(None, min_length=1)
    care_plan_id: Optional[str] = None
    plan_ref: Optional[str] = None
    plan_type: Optional[str] = None
    plan_content: Optional[str] = None
    goals: Optional[str] = None
    activities: Optional[str] = None
    follow_up_schedule: Optional[str] = None
    followup1: Optional[bool] = None
    followup2: Optional[bool] = None
    followup3: Optional[bool] = None
    followup4: Optional[bool] = None
    followup5: Optional[bool] = None
    followup6: Optional[bool] = None
    due_date: OptionalDate = None
    sent_date: OptionalDate = None
    completed_date: OptionalDate = None
    status: Optional[ImplementationPlanStatus] = None
    is_active: Optional[bool] = None
    comments: Optional[str] = None
