"""Care overview API endpoint."""

from fastapi import APIRouter

from ungdoms.api.dependencies import StoreDep
from ungdoms.schemas.queries import CareOverview
from ungdoms.services import queries

router = APIRouter()


@router.get("/overview", response_model=CareOverview, summary="Care overview counts")
async def get_overview(store: StoreDep) -> CareOverview:
    """Totals and follow-up counts for care plans, GFPs, clients and Vimsa time."""
    return queries.care_overview(store.state)
