"""
Lead Model Module

Sales leads captured from marketplaces and social channels. Only the source is
required; everything else is filled in as the lead is worked.
"""
from enum import Enum
from typing import Optional
from sqlmodel import SQLModel, Field
import uuid

from datetime import datetime, timezone


class LeadStatus(str, Enum):
    new = "new"
    contacted = "contacted"
    qualified = "qualified"
    converted = "converted"


class LeadBase(SQLModel):
    """
    Caller-suppliable lead fields.
    """
    # Channel the lead came from, e.g. "olx_angola", "facebook", "instagram"
    source: str

    # Contact details, usually incomplete for fresh leads
    company_name: Optional[str] = None
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    # Pipeline stage - valid values: "new", "contacted", "qualified", "converted"
    status: LeadStatus = Field(default=LeadStatus.new)
    notes: Optional[str] = None


LeadCreate = LeadBase


class Lead(LeadBase):
    """Lead record with store-assigned id and creation time."""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class LeadUpdate(SQLModel):
    source: Optional[str] = None
    company_name: Optional[str] = None
    contact_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[LeadStatus] = None
    notes: Optional[str] = None
