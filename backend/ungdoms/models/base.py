"""Base record with identity, timestamps and version."""

from datetime import date, datetime, timedelta, timezone
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


def next_timestamp(previous: datetime) -> datetime:
    """Return now, nudged past ``previous`` so updatedAt strictly increases."""
    now = utcnow()
    if now > previous:
        return now
    return previous + timedelta(microseconds=1)


def _empty_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Workflow dates arrive from the browser as "YYYY-MM-DD" or "" for unset
OptionalDate = Annotated[Optional[date], BeforeValidator(_empty_to_none)]
OptionalDateTime = Annotated[Optional[datetime], BeforeValidator(_empty_to_none)]


class CamelModel(BaseModel):
    """Model serialized with camelCase keys, accepting either spelling on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Record(CamelModel):
    """
    Base class for every persisted entity.

    Includes:
    - id (prefixed string, e.g. ``c_<uuid>``)
    - createdAt / updatedAt (UTC)
    - version (starts at 1, +1 on every mutation)

    Unknown keys found in the JSON document are kept so older documents
    survive a load/flush cycle untouched.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: str = Field(..., min_length=1)
    created_at: datetime
    updated_at: datetime
    version: int = Field(default=1, ge=1)

    @field_validator("created_at", "updated_at", mode="after")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class SoftDeleteRecord(Record):
    """Record removed by stamping ``deletedAt`` instead of being dropped."""

    deleted_at: OptionalDateTime = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
