"""
Portfolio Endpoints Module

CRUD endpoints for portfolio items (showcase entries for past work).
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from agency_dash.models.portfolio import PortfolioItem, PortfolioItemCreate, PortfolioItemUpdate
from agency_dash.store import MemoryStore
from agency_dash.api import deps

router = APIRouter()


@router.get("", response_model=List[PortfolioItem])
def list_portfolio_items(store: MemoryStore = Depends(deps.get_store)):
    return store.portfolio_items.list()


@router.get("/{item_id}", response_model=PortfolioItem)
def read_portfolio_item(item_id: str, store: MemoryStore = Depends(deps.get_store)):
    item = store.portfolio_items.get(item_id)
    if not item:
        raise HTTPException(status_code=404, detail="Portfolio item not found")
    return item


@router.post("", response_model=PortfolioItem, status_code=status.HTTP_201_CREATED)
def create_portfolio_item(item: PortfolioItemCreate, store: MemoryStore = Depends(deps.get_store)):
    return store.portfolio_items.create(item)


@router.patch("/{item_id}", response_model=PortfolioItem)
def update_portfolio_item(
    item_id: str,
    item_update: PortfolioItemUpdate,
    store: MemoryStore = Depends(deps.get_store),
):
    item = store.portfolio_items.update(item_id, item_update)
    if not item:
        raise HTTPException(status_code=404, detail="Portfolio item not found")
    return item


@router.delete("/{item_id}")
def delete_portfolio_item(item_id: str, store: MemoryStore = Depends(deps.get_store)):
    if not store.portfolio_items.delete(item_id):
        raise HTTPException(status_code=404, detail="Portfolio item not found")
    return {"status": "success", "detail": "Portfolio item deleted"}
