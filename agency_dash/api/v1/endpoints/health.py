from fastapi import APIRouter, Depends
from typing import Any
from agency_dash.core.config import settings
from agency_dash.store import MemoryStore
from agency_dash.api import deps

router = APIRouter()

@router.get("", response_model=dict[str, Any])
def health_check(store: MemoryStore = Depends(deps.get_store)) -> Any:
    """
    Health check endpoint. Answers 503 once the store has been closed.
    """
    return {"status": "ok", "version": settings.VERSION}
