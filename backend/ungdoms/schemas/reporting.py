"""Pydantic schemas for weekly documentation, monthly reports and Vimsa time."""

from typing import Optional

from pydantic import Field

from ungdoms.models.base import OptionalDate, OptionalDateTime
from ungdoms.models.reporting import MonthlyReportStatus, QualityAssessment
from ungdoms.schemas.base import InputSchema, UpdateSchema


class WeeklyDocumentationCreate(InputSchema):
    """Schema for creating weekly documentation for a client and ISO week."""

    client_id: str = Field(..., min_length=1)
    staff_id: Optional[str] = Field(None, description="Defaults to the acting staff member")
    year: int = Field(..., ge=2000, le=2100)
    week: int = Field(..., ge=1, le=53, description="ISO week number")
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


class WeeklyDocumentationUpdate(UpdateSchema):
    """Schema for updating weekly documentation (entries are managed separately)."""

    client_id: Optional[str] = Field(None, min_length=1)
    staff_id: Optional[str] = Field(None, min_length=1)
    year: Optional[int] = Field(None, ge=2000, le=2100)
    week: Optional[int] = Field(None, ge=1, le=53)
    monday_documented: Optional[bool] = None
    tuesday_documented: Optional[bool] = None
    wednesday_documented: Optional[bool] = None
    thursday_documented: Optional[bool] = None
    friday_documented: Optional[bool] = None
    saturday_documented: Optional[bool] = None
    sunday_documented: Optional[bool] = None
    documentation: Optional[str] = None
    comments: Optional[str] = None
    quality_assessment: Optional[QualityAssessment] = None
    approved: Optional[bool] = None


class WeeklyDocEntryCreate(InputSchema):
    """Schema for adding a dated entry to weekly documentation."""

    date: OptionalDate = Field(None, description="Day the activities took place")
    activities: str = Field("", max_length=5000)
    hours: float = Field(0.0, ge=0, le=24)


class WeeklyDocEntryUpdate(UpdateSchema):
    """Schema for updating a weekly documentation entry."""

    NULLABLE = frozenset({"date"})

    date: OptionalDate = None
    activities: Optional[str] = Field(None, max_length=5000)
    hours: Optional[float] = Field(None, ge=0, le=24)


class MonthlyReportCreate(InputSchema):
    """Schema for creating a monthly report."""

    client_id: str = Field(..., min_length=1)
    staff_id: Optional[str] = Field(None, description="Defaults to the acting staff member")
    year: int = Field(..., ge=2000, le=2100)
    month: int = Field(..., ge=1, le=12)
    report_content: str = ""
    status: MonthlyReportStatus = MonthlyReportStatus.NOT_STARTED
    approved: bool = False
    quality: QualityAssessment = QualityAssessment.PENDING
    comment: str = ""
    submission_date: OptionalDateTime = None


class MonthlyReportUpdate(UpdateSchema):
    """Schema for updating a monthly report (all fields optional)."""

    NULLABLE = frozenset({"submission_date"})

    client_id: Optional[str] = Field(None, min_length=1)
    staff_id: Optional[str] = Field(None, min_length=1)
    year: Optional[int] = Field(None, ge=2000, le=2100)
    month: Optional[int] = Field(None, ge=1, le=12)
    report_content: Optional[str] = None
    status: Optional[MonthlyReportStatus] = None
    approved: Optional[bool] = None
    quality: Optional[QualityAssessment] = None
    comment: Optional[str] = None
    submission_date: OptionalDateTime = None


class VimsaTimeCreate(InputSchema):
    """Schema for registering a week of Vimsa time."""

    client_id: str = Field(..., min_length=1)
    staff_id: Optional[str] = Field(None, description="Defaults to the acting staff member")
    year: int = Field(..., ge=2000, le=2100)
    week: int = Field(..., ge=1, le=53)
    hours_worked: float = Field(0.0, ge=0, le=168, description="Max hours in a week")
    monday: float = Field(0.0, ge=0, le=24)
    tuesday: float = Field(0.0, ge=0, le=24)
    wednesday: float = Field(0.0, ge=0, le=24)
    thursday: float = Field(0.0, ge=0, le=24)
    friday: float = Field(0.0, ge=0, le=24)
    saturday: float = Field(0.0, ge=0, le=24)
    sunday: float = Field(0.0, ge=0, le=24)
    approved: bool = False
    matches_documentation: bool = False
    comments: str = ""


class VimsaTimeUpdate(UpdateSchema):
    """Schema for updating Vimsa time (all fields optional)."""

    client_id: Optional[str] = Field(None, min_length=1)
    staff_id: Optional[str] = Field(None, min_length=1)
    year: Optional[int] = Field(None, ge=2000, le=2100)
    week: Optional[int] = Field(None, ge=1, le=53)
    hours_worked: Optional[float] = Field(None, ge=0, le=168)
    monday: Optional[float] = Field(None, ge=0, le=24)
    tuesday: Optional[float] = Field(None, ge=0, le=24)
    wednesday: Optional[float] = Field(None, ge=0, le=24)
    thursday: Optional[float] = Field(None, ge=0, le=24)
    friday: Optional[float] = Field(None, ge=0, le=24)
    saturday: Optional[float] = Field(None, ge=0, le=24)
    sunday: Optional[float] = Field(None, ge=0, le=24)
    approved: Optional[bool] = None
    matches_documentation: Optional[bool] = None
    comments: Optional[str] = None
