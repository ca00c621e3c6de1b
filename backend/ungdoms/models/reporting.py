"""Weekly documentation, monthly reports and Vimsa time models."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import ConfigDict, Field, model_validator

from ungdoms.models.base import CamelModel, OptionalDate, OptionalDateTime, Record

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


class QualityAssessment(str, Enum):
    """Quality review outcome for documentation and reports."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class MonthlyReportStatus(str, Enum):
    """Monthly report progress."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    LATE = "late"


class WeeklyDocEntry(CamelModel):
    """Single dated entry nested inside a weekly documentation record."""

    model_config = ConfigDict(extra="allow")

    id: str
    date: OptionalDate = None
    activities: str = ""
    hours: float = Field(default=0.0, ge=0, le=24)
    created_at: datetime
    updated_at: datetime


class WeeklyDocumentation(Record):
    """
    Documentation for one client and one ISO week.

    The (year, week) pair is not unique per client; several records for the
    same period may coexist.
    """

    client_id: str = ""
    staff_id: str = ""
    year: int = Field(..., ge=2000, le=2100)
    week: int = Field(..., ge=1, le=53)
    monday_documented: bool = False
    tuesday_documented: bool = False
    wednesday_documented: bool = False
    thursday_documented: bool = False
    friday_documented: bool = False
    saturday_documented: bool = False
    sunday_documented: bool = False
    documentation: str = ""
    comments: str = ""
    quality_assessment: QualityAssessment = QualityAssessment.PENDING
    approved: bool = False
    entries: list[WeeklyDocEntry] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def stamp_legacy_entries(cls, data: Any) -> Any:
        """Entries written without timestamps inherit the parent's ``updatedAt``."""
        if not isinstance(data, dict) or not isinstance(data.get("entries"), list):
            return data

        stamp = data.get("updatedAt") or data.get("updated_at") or data.get("createdAt")
        if stamp is None:
            return data

        entries = []
        for entry in data["entries"]:
            if isinstance(entry, dict):
                entry = dict(entry)
                if "createdAt" not in entry and "created_at" not in entry:
                    entry["createdAt"] = stamp
                if "updatedAt" not in entry and "updated_at" not in entry:
                    entry["updatedAt"] = stamp
            entries.append(entry)
        return {**data, "entries": entries}

    @property
    def documented_days(self) -> list[str]:
        """Weekday names marked as documented."""
        return [day for day in WEEKDAYS if getattr(self, f"{day}_documented")]

    def __repr__(self) -> str:
        return f"<WeeklyDocumentation id={self.id} client_id={self.client_id} {self.year}-W{self.week:02d}>"


class MonthlyReport(Record):
    """Monthly report for one client and one calendar month."""

    client_id: str = ""
    staff_id: str = ""
    year: int = Field(..., ge=2000, le=2100)
    month: int = Field(..., ge=1, le=12)
    report_content: str = ""
    status: MonthlyReportStatus = MonthlyReportStatus.NOT_STARTED
    approved: bool = False
    quality: QualityAssessment = QualityAssessment.PENDING
    comment: str = ""
    submission_date: OptionalDateTime = None

    def __repr__(self) -> str:
        return f"<MonthlyReport id={self.id} client_id={self.client_id} {self.year}-{self.month:02d}>"


class VimsaTime(Record):
    """
    Weekly worked hours (Vimsa tid) for a client.

    ``matchesDocumentation`` is the manual cross-check flag against the
    weekly documentation of the same period.
    """

    client_id: str = ""
    staff_id: str = ""
    year: int = Field(..., ge=2000, le=2100)
    week: int = Field(..., ge=1, le=53)
    hours_worked: float = Field(default=0.0, ge=0, le=168)
    monday: float = Field(default=0.0, ge=0, le=24)
    tuesday: float = Field(default=0.0, ge=0, le=24)
    wednesday: float = Field(default=0.0, ge=0, le=24)
    thursday: float = Field(default=0.0, ge=0, le=24)
    friday: float = Field(default=0.0, ge=0, le=24)
    saturday: float = Field(default=0.0, ge=0, le=24)
    sunday: float = Field(default=0.0, ge=0, le=24)
    approved: bool = False
    matches_documentation: bool = False
    comments: str = ""

    @property
    def daily_total(self) -> float:
        """Sum of the per-day hours."""
        return sum(getattr(self, day) for day in WEEKDAYS)

    def __repr__(self) -> str:
        return f"<VimsaTime id={self.id} client_id={self.client_id} {self.year}-W{self.week:02d}>"

