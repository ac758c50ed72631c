from fastapi import APIRouter
from agency_dash.api.v1.endpoints import (
    health, dashboard,
    clients, projects, quotes, leads, portfolio
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])

# Resource endpoints
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(quotes.router, prefix="/quotes", tags=["quotes"])
api_router.include_router(leads.router, prefix="/leads", tags=["leads"])
api_router.include_router(portfolio.router, prefix="/portfolio", tags=["portfolio"])
