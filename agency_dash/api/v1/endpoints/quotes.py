"""
Quote Endpoints Module

CRUD endpoints for price quotes. The total amount is supplied by the caller.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from agency_dash.models.quote import Quote, QuoteCreate, QuoteUpdate
from agency_dash.store import MemoryStore
from agency_dash.api import deps

router = APIRouter()


@router.get("", response_model=List[Quote])
def list_quotes(store: MemoryStore = Depends(deps.get_store)):
    return store.quotes.list()


@router.get("/{quote_id}", response_model=Quote)
def read_quote(quote_id: str, store: MemoryStore = Depends(deps.get_store)):
    quote = store.quotes.get(quote_id)
    if not quote:
        raise HTTPException(status_code=404, detail="Quote not found")
    return quote


@router.post("", response_model=Quote, status_code=status.HTTP_201_CREATED)
def create_quote(quote: QuoteCreate, store: MemoryStore = Depends(deps.get_store)):
    return store.quotes.create(quote)


@router.patch("/{quote_id}", response_model=Quote)
def update_quote(
    quote_id: str,
    quote_update: QuoteUpdate,
    store: MemoryStore = Depends(deps.get_store),
):
    """
    Update an existing quote, e.g. to mark it as sent or accepted.

    Raises:
        HTTPException 404: If the quote doesn't exist
    """
    quote = store.quotes.update(quote_id, quote_update)
    if not quote:
        raise HTTPException(status_code=404, detail="Quote not found")
    return quote


@router.delete("/{quote_id}")
def delete_quote(quote_id: str, store: MemoryStore = Depends(deps.get_store)):
    if not store.quotes.delete(quote_id):
        raise HTTPException(status_code=404, detail="Quote not found")
    return {"status": "success", "detail": "Quote deleted"}
