from .client import Client, ClientBase, ClientCreate, ClientStatus, ClientUpdate
from .project import Project, ProjectBase, ProjectCreate, ProjectStatus, ProjectUpdate
from .quote import Quote, QuoteBase, QuoteCreate, QuoteStatus, QuoteUpdate
from .lead import Lead, LeadBase, LeadCreate, LeadStatus, LeadUpdate
from .portfolio import (
    PortfolioCategory, PortfolioItem, PortfolioItemBase,
    PortfolioItemCreate, PortfolioItemUpdate,
)
from .stats import DashboardStats

__all__ = [
    "Client", "ClientBase", "ClientCreate", "ClientStatus", "ClientUpdate",
    "Project", "ProjectBase", "ProjectCreate", "ProjectStatus", "ProjectUpdate",
    "Quote", "QuoteBase", "QuoteCreate", "QuoteStatus", "QuoteUpdate",
    "Lead", "LeadBase", "LeadCreate", "LeadStatus", "LeadUpdate",
    "PortfolioCategory", "PortfolioItem", "PortfolioItemBase",
    "PortfolioItemCreate", "PortfolioItemUpdate",
    "DashboardStats",
]
