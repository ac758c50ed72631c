"""
Lead Endpoints Module

This module provides CRUD endpoints for sales leads. A lead only needs a source
when it is created; contact details and notes are added as it moves through the
pipeline.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from agency_dash.models.lead import Lead, LeadCreate, LeadUpdate
from agency_dash.store import MemoryStore
from agency_dash.api import deps

router = APIRouter()


@router.get("", response_model=List[Lead])
def list_leads(store: MemoryStore = Depends(deps.get_store)):
    """
    Retrieve all leads.

    Returns:
        List[Lead]: Every lead in insertion order
    """
    return store.leads.list()


@router.get("/{lead_id}", response_model=Lead)
def read_lead(lead_id: str, store: MemoryStore = Depends(deps.get_store)):
    """
    Get a specific lead by ID.

    Raises:
        HTTPException 404: If the lead doesn't exist
    """
    lead = store.leads.get(lead_id)
    if not lead:
        raise HTTPException(status_code=404, detail="Lead not found")
    return lead


@router.post("", response_model=Lead, status_code=status.HTTP_201_CREATED)
def create_lead(lead: LeadCreate, store: MemoryStore = Depends(deps.get_store)):
    """
    Create a new lead.

    Args:
        lead: Lead data; only source is required
        store: Entity store

    Returns:
        Lead: The newly created lead
    """
    return store.leads.create(lead)


@router.patch("/{lead_id}", response_model=Lead)
def update_lead(
    lead_id: str,
    lead_update: LeadUpdate,
    store: MemoryStore = Depends(deps.get_store),
):
    """
    Update an existing lead.

    Raises:
        HTTPException 404: If the lead doesn't exist
    """
    lead = store.leads.update(lead_id, lead_update)
    if not lead:
        raise HTTPException(status_code=404, detail="Lead not found")
    return lead


@router.delete("/{lead_id}")
def delete_lead(lead_id: str, store: MemoryStore = Depends(deps.get_store)):
    """
    Delete a lead.

    Raises:
        HTTPException 404: If the lead doesn't exist
    """
    if not store.leads.delete(lead_id):
        raise HTTPException(status_code=404, detail="Lead not found")
    return {"status": "success", "detail": "Lead deleted"}
