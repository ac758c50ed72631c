"""
Project Model Module

This module defines the Project models for tracking client work with status, budget
and completion time. The completion timestamp is owned by the store: callers never
set it directly, it is stamped the first time a project moves to "completed".
"""
from enum import Enum
from typing import Optional
from sqlmodel import SQLModel, Field
import uuid

from datetime import datetime, timezone


class ProjectStatus(str, Enum):
    active = "active"
    pending = "pending"
    completed = "completed"
    cancelled = "cancelled"


class ProjectBase(SQLModel):
    """
    Caller-suppliable project fields.
    """
    # Owning client - a plain identifier, not checked against existing clients
    client_id: str

    # Basic project information
    name: str
    description: Optional[str] = None

    # Status tracking - valid values: "active", "pending", "completed", "cancelled"
    status: ProjectStatus = Field(default=ProjectStatus.active)

    # Budget in whole currency units (Kz)
    budget: Optional[int] = None


ProjectCreate = ProjectBase


class Project(ProjectBase):
    """
    Project record as held by the store.

    Attributes:
        id: Unique identifier (UUID) generated by the store
        client_id: Identifier of the client this project is for
        name: Project name/title
        description: Free-text project description
        status: Current project status
        budget: Total project budget in whole currency units
        created_at: UTC timestamp when the project was created
        completed_at: UTC timestamp of the first transition to "completed", None until then
    """
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))

    # Audit timestamps
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    completed_at: Optional[datetime] = None


class ProjectUpdate(SQLModel):
    """Partial update payload. completed_at is deliberately absent: it is store-managed."""
    client_id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[ProjectStatus] = None
    budget: Optional[int] = None
