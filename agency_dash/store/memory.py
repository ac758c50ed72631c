"""
Memory Store Module

This module defines MemoryStore, the authoritative in-process state for clients,
projects, quotes, leads and portfolio items, plus the dashboard statistics derived
from them.

The store is an explicitly constructed object: the application creates one at
startup, hands it to request handlers through a dependency and closes it on
shutdown. Nothing is persisted; closing the store drops its records.
"""
import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Optional

from agency_dash.models import (
    Client, ClientCreate, ClientUpdate,
    Quote, QuoteCreate, QuoteUpdate, QuoteStatus,
    Lead, LeadCreate, LeadUpdate,
    PortfolioItem, PortfolioItemCreate, PortfolioItemUpdate,
    ProjectStatus, DashboardStats,
)
from agency_dash.store.collection import EntityCollection, ProjectCollection

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def start_of_month(moment: datetime) -> datetime:
    """First instant of the calendar month containing moment, in moment's timezone."""
    return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


class MemoryStore:
    """
    In-memory entity store.

    Attributes:
        clients: Client collection
        projects: Project collection (adds list_by_client and completion stamping)
        quotes: Quote collection
        leads: Lead collection
        portfolio_items: Portfolio item collection

    Args:
        clock: Callable returning the current timezone-aware datetime. Used for
            creation/completion timestamps and the statistics month boundary.
            Defaults to UTC now.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._lock = threading.RLock()
        self._clock = clock or utcnow
        self._closed = False

        self.clients: EntityCollection[Client] = EntityCollection(
            "client", Client, ClientCreate, ClientUpdate, self._lock, self._clock
        )
        self.projects = ProjectCollection(self._lock, self._clock)
        self.quotes: EntityCollection[Quote] = EntityCollection(
            "quote", Quote, QuoteCreate, QuoteUpdate, self._lock, self._clock
        )
        self.leads: EntityCollection[Lead] = EntityCollection(
            "lead", Lead, LeadCreate, LeadUpdate, self._lock, self._clock
        )
        self.portfolio_items: EntityCollection[PortfolioItem] = EntityCollection(
            "portfolio item", PortfolioItem, PortfolioItemCreate, PortfolioItemUpdate,
            self._lock, self._clock,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def get_stats(self) -> DashboardStats:
        """
        Compute the dashboard aggregates from the current records.

        monthly_revenue sums the budgets of projects completed since the first
        instant of the current month. Projects without a budget contribute nothing.
        Nothing is cached; every call recomputes from scratch.
        """
        with self._lock:
            month_start = start_of_month(self._clock())
            monthly_revenue = sum(
                project.budget
                for project in self.projects.list()
                if project.completed_at is not None
                and project.completed_at >= month_start
                and project.budget
            )
            return DashboardStats(
                total_clients=self.clients.count(),
                active_projects=self.projects.count(status=ProjectStatus.active),
                sent_quotes=self.quotes.count(status=QuoteStatus.sent),
                monthly_revenue=monthly_revenue,
            )

    def close(self) -> None:
        """Drop all records. The store keeps no durable state, so there is nothing to flush."""
        with self._lock:
            for collection in (self.clients, self.projects, self.quotes, self.leads, self.portfolio_items):
                collection.clear()
            self._closed = True
        logger.info("Memory store closed")

    def __enter__(self) -> "MemoryStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
