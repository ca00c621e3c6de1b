"""Staff and client repositories."""

from ungdoms.models.people import Client, Staff
from ungdoms.services.repository import SoftDeleteRepository


class StaffRepository(SoftDeleteRepository[Staff]):
    """Staff members (soft delete)."""

    collection = "staff"
    model = Staff
    id_prefix = "s"
    entity_name = "Staff"


class ClientRepository(SoftDeleteRepository[Client]):
    """Clients (soft delete). A client belongs to one staff member via ``staffId``."""

    collection = "clients"
    model = Client
    id_prefix = "c"
    entity_name = "Client"
