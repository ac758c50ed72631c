"""
Portfolio Model Module

Showcase entries for past work. Featured items are the ones surfaced first on the
public portfolio page.
"""
from enum import Enum
from typing import Optional
from sqlmodel import SQLModel, Field
import uuid

from datetime import datetime, timezone


class PortfolioCategory(str, Enum):
    branding = "branding"
    marketing = "marketing"
    documentation = "documentation"
    assistant = "assistant"


class PortfolioItemBase(SQLModel):
    title: str
    description: Optional[str] = None

    # Service line - valid values: "branding", "marketing", "documentation", "assistant"
    category: PortfolioCategory

    image_url: Optional[str] = None
    client_id: Optional[str] = None
    featured: bool = False


PortfolioItemCreate = PortfolioItemBase


class PortfolioItem(PortfolioItemBase):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class PortfolioItemUpdate(SQLModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[PortfolioCategory] = None
    image_url: Optional[str] = None
    client_id: Optional[str] = None
    featured: Optional[bool] = None
