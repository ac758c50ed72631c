"""
API Dependencies Module

This module provides FastAPI dependency functions shared by the endpoint modules.
The store is created by the application factory and attached to app.state; handlers
receive it through get_store instead of importing a global instance.
"""
from fastapi import HTTPException, Request, status

from agency_dash.store import MemoryStore


def get_store(request: Request) -> MemoryStore:
    """
    Dependency that returns the store owned by the running application.

    Raises:
        HTTPException 503: If the store has already been closed (application shutting down)
    """
    store: MemoryStore = request.app.state.store
    if store.closed:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Store is closed",
        )
    return store
