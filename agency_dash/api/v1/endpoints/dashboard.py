from fastapi import APIRouter, Depends
from agency_dash.models.stats import DashboardStats
from agency_dash.store import MemoryStore
from agency_dash.api import deps

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
def read_stats(store: MemoryStore = Depends(deps.get_store)):
    """
    Dashboard header figures: total clients, active projects, sent quotes and
    revenue from projects completed this month.
    """
    return store.get_stats()
