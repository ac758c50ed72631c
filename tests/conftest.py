"""
Pytest configuration and shared fixtures
"""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from agency_dash.main import create_app
from agency_dash.store import MemoryStore


class FakeClock:
    """Settable clock so timestamps and month boundaries are deterministic"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 10, 15, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def store(clock):
    """Empty store driven by the fake clock"""
    with MemoryStore(clock=clock) as memory_store:
        yield memory_store


@pytest.fixture
def api_client(store):
    """Test client bound to the store fixture"""
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def client_data():
    return {
        "company_name": "Kwanza Design Lda",
        "contact_name": "Ana Ferreira",
        "email": "ana@kwanza.ao",
        "phone": "+244 900 000 000",
        "location": "Luanda",
    }


@pytest.fixture
def project_data():
    def _build(client_id: str, **overrides):
        data = {
            "client_id": client_id,
            "name": "Website Institucional",
            "description": "Novo site e identidade",
            "budget": 45000,
        }
        data.update(overrides)
        return data
    return _build


@pytest.fixture
def quote_data():
    return {
        "client_id": None,
        "services": ["branding"],
        "base_amount": 20000,
        "urgency_factor": "1.5",
        "total_amount": 30000,
    }
