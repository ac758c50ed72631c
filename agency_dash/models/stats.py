from sqlmodel import SQLModel


class DashboardStats(SQLModel):
    """Point-in-time aggregates shown on the dashboard header cards."""
    total_clients: int = 0
    active_projects: int = 0
    sent_quotes: int = 0
    monthly_revenue: int = 0
