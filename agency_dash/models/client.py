"""
Client Model Module

This module defines the Client models representing the companies the agency works for.
Clients are the anchor other records point at: projects, quotes and portfolio items
may carry a client_id, but those links are soft references that the store never
validates or cascades.
"""
from enum import Enum
from typing import Optional
from sqlmodel import SQLModel, Field
import uuid

from datetime import datetime, timezone


class ClientStatus(str, Enum):
    active = "active"
    pending = "pending"
    inactive = "inactive"


class ClientBase(SQLModel):
    """
    Caller-suppliable client fields.

    This is also the create payload: every field without a default is required.
    """
    # Company and contact details - all required
    company_name: str
    contact_name: str
    email: str
    phone: str
    location: str

    # Relationship status - valid values: "active", "pending", "inactive"
    status: ClientStatus = Field(default=ClientStatus.active)


ClientCreate = ClientBase


class Client(ClientBase):
    """
    Client record as held by the store.

    Attributes:
        id: Unique identifier (UUID) generated by the store for each client
        company_name: Official company/organization name
        contact_name: Primary contact person at the client organization
        email: Email address for the primary contact
        phone: Phone number for the primary contact
        location: City or region the client operates from
        status: Current relationship status
        created_at: UTC timestamp of when the client record was created
    """
    # Primary key - auto-generated UUID for global uniqueness
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    # Audit timestamp - set once by the store on creation
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ClientUpdate(SQLModel):
    """Partial update payload: only the fields actually sent are applied."""
    company_name: Optional[str] = None
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    status: Optional[ClientStatus] = None
