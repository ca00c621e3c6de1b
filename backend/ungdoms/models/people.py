"""Staff and client models."""

from enum import Enum

from ungdoms.models.base import OptionalDate, SoftDeleteRecord


class ClientStatus(str, Enum):
    """Client enrolment status."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class Staff(SoftDeleteRecord):
    """
    Staff member (behandlare).

    Contact fields are PII and never logged.
    """

    name: str = ""
    initials: str = ""
    personal_number: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    employment_date: OptionalDate = None
    role: str = ""
    department: str = ""

    def __repr__(self) -> str:
        """String representation (avoid PII in logs)."""
        return f"<Staff id={self.id} initials={self.initials}>"


class Client(SoftDeleteRecord):
    """
    Client record.

    GDPR-minimized: only initials identify the client, never a full name.
    """

    initials: str = ""
    staff_id: str = ""
    personal_number: str = ""
    notes: str = ""
    status: ClientStatus = ClientStatus.ACTIVE

    def __repr__(self) -> str:
        return f"<Client id={self.id} initials={self.initials} staff_id={self.staff_id}>"


def initials_from_name(name: str) -> str:
    """First letter of each name part, e.g. "Anna Lindberg" -> "AL"."""
    return "".join(part[0] for part in name.split() if part).upper()
