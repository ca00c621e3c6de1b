"""Pydantic schemas for Staff and Client API."""

from typing import Optional

from pydantic import Field, model_validator

from ungdoms.models.base import OptionalDate
from ungdoms.models.people import ClientStatus, initials_from_name
from ungdoms.schemas.base import InputSchema, UpdateSchema


class StaffCreate(InputSchema):
    """Schema for creating a staff member."""

    name: str = Field(..., min_length=1, max_length=255, description="Full name")
    initials: Optional[str] = Field(
        None, max_length=10, description="Initials; derived from name when omitted"
    )
    personal_number: str = Field("", max_length=20)
    phone: str = Field("", max_length=50)
    email: str = Field("", max_length=255)
    address: str = Field("", max_length=500)
    employment_date: OptionalDate = Field(None, description="Employment start date")
    role: str = Field("", max_length=100)
    department: str = Field("", max_length=100)

    @model_validator(mode="after")
    def default_initials(self) -> "StaffCreate":
        """Derive initials from the name when none were given."""
        if not self.initials:
            self.initials = initials_from_name(self.name)
        return self


class StaffUpdate(UpdateSchema):
    """Schema for updating a staff member (all fields optional)."""

    NULLABLE = frozenset({"employment_date"})

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    initials: Optional[str] = Field(None, min_length=1, max_length=10)
    personal_number: Optional[str] = Field(None, max_length=20)
    phone: Optional[str] = Field(None, max_length=50)
    email: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = Field(None, max_length=500)
    employment_date: OptionalDate = None
    role: Optional[str] = Field(None, max_length=100)
    department: Optional[str] = Field(None, max_length=100)


class ClientCreate(InputSchema):
    """Schema for creating a client. Only initials are stored, never a full name."""

    initials: str = Field(..., min_length=1, max_length=10, description="Client initials")
    staff_id: Optional[str] = Field(
        None, description="Responsible staff; defaults to the acting staff member"
    )
    personal_number: str = Field("", max_length=20)
    notes: str = Field("", max_length=5000)
    status: ClientStatus = Field(ClientStatus.ACTIVE)


class ClientUpdate(UpdateSchema):
    """Schema for updating a client (all fields optional)."""

    initials: Optional[str] = Field(None, min_length=1, max_length=10)
    staff_id: Optional[str] = Field(None, min_length=1)
    personal_number: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = Field(None, max_length=5000)
    status: Optional[ClientStatus] = None
