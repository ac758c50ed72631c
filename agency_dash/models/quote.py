"""
Quote Model Module

Price quotes sent to (prospective) clients. The total amount is the base amount
adjusted by the urgency factor; that calculation belongs to whoever builds the
quote, the store only keeps the numbers it is given.
"""
from enum import Enum
from typing import List, Optional
from sqlmodel import SQLModel, Field
import uuid

from datetime import datetime, timezone


class QuoteStatus(str, Enum):
    pending = "pending"
    sent = "sent"
    accepted = "accepted"
    rejected = "rejected"


class QuoteBase(SQLModel):
    # Optional link to a client; quotes can be drafted for unknown prospects
    client_id: Optional[str] = None

    # Service names, e.g. ["branding", "marketing"]
    services: Optional[List[str]] = None

    # Amounts in whole currency units (Kz)
    base_amount: int
    urgency_factor: str = "1.0"  # decimal multiplier kept as text
    total_amount: int

    status: QuoteStatus = Field(default=QuoteStatus.pending)


QuoteCreate = QuoteBase


class Quote(QuoteBase):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class QuoteUpdate(SQLModel):
    client_id: Optional[str] = None
    services: Optional[List[str]] = None
    base_amount: Optional[int] = None
    urgency_factor: Optional[str] = None
    total_amount: Optional[int] = None
    status: Optional[QuoteStatus] = None
