"""
Client Endpoints Module

This module provides CRUD endpoints for managing clients.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from agency_dash.models.client import Client, ClientCreate, ClientUpdate
from agency_dash.store import MemoryStore
from agency_dash.api import deps

router = APIRouter()


@router.get("", response_model=List[Client])
def list_clients(store: MemoryStore = Depends(deps.get_store)):
    """
    Retrieve all clients.

    Returns:
        List[Client]: Every client in insertion order
    """
    return store.clients.list()


@router.get("/{client_id}", response_model=Client)
def read_client(client_id: str, store: MemoryStore = Depends(deps.get_store)):
    """
    Get a specific client by ID.

    Args:
        client_id: ID of the client to retrieve
        store: Entity store

    Returns:
        Client: The requested client

    Raises:
        HTTPException 404: If the client doesn't exist
    """
    client = store.clients.get(client_id)
    if not client:
        raise HTTPException(status_code=404, detail="Client not found")
    return client


@router.post("", response_model=Client, status_code=status.HTTP_201_CREATED)
def create_client(client: ClientCreate, store: MemoryStore = Depends(deps.get_store)):
    """
    Create a new client.

    Args:
        client: Client data to create
        store: Entity store

    Returns:
        Client: The newly created client with its generated id
    """
    return store.clients.create(client)


@router.patch("/{client_id}", response_model=Client)
def update_client(
    client_id: str,
    client_update: ClientUpdate,
    store: MemoryStore = Depends(deps.get_store),
):
    """
    Update an existing client. Only the fields present in the body are changed.

    Raises:
        HTTPException 404: If the client doesn't exist
    """
    client = store.clients.update(client_id, client_update)
    if not client:
        raise HTTPException(status_code=404, detail="Client not found")
    return client


@router.delete("/{client_id}")
def delete_client(client_id: str, store: MemoryStore = Depends(deps.get_store)):
    """
    Delete a client.

    Projects, quotes and portfolio items pointing at the client are kept as they are.

    Raises:
        HTTPException 404: If the client doesn't exist
    """
    if not store.clients.delete(client_id):
        raise HTTPException(status_code=404, detail="Client not found")
    return {"status": "success", "detail": "Client deleted"}
