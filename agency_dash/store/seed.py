"""
Sample data used to bootstrap a fresh store so the dashboard has something to show.
Enabled with the SEED_SAMPLE_DATA setting.
"""
import logging

from agency_dash.store.memory import MemoryStore

logger = logging.getLogger(__name__)


def seed_sample_data(store: MemoryStore) -> None:
    """Insert two clients, two projects, one quote, one lead and one portfolio item."""
    client1 = store.clients.create({
        "company_name": "Empresa ABC Lda",
        "contact_name": "João Silva",
        "email": "joao@empresa.co.ao",
        "phone": "+244 923 456 789",
        "location": "Luanda",
        "status": "active",
    })
    client2 = store.clients.create({
        "company_name": "XYZ Corporation",
        "contact_name": "Maria Santos",
        "email": "maria@xyz.ao",
        "phone": "+244 912 345 678",
        "location": "Benguela",
        "status": "pending",
    })

    store.projects.create({
        "client_id": client1.id,
        "name": "Rebranding Completo",
        "description": "Desenvolvimento de nova identidade visual",
        "status": "active",
        "budget": 45000,
    })
    store.projects.create({
        "client_id": client2.id,
        "name": "Marketing Digital",
        "description": "Campanha de marketing nas redes sociais",
        "status": "pending",
        "budget": 30000,
    })

    store.quotes.create({
        "client_id": client1.id,
        "services": ["branding", "marketing"],
        "base_amount": 27000,
        "urgency_factor": "1.0",
        "total_amount": 27000,
        "status": "sent",
    })

    store.leads.create({
        "source": "olx_angola",
        "company_name": "Tech Solutions AO",
        "contact_name": "Carlos Mendes",
        "email": "carlos@techsolutions.ao",
        "phone": "+244 934 567 890",
        "status": "qualified",
    })

    store.portfolio_items.create({
        "title": "Identidade Visual Moderna",
        "description": "Branding completo para empresa de tecnologia",
        "category": "branding",
        "client_id": client1.id,
        "featured": True,
    })

    logger.info("Seeded store with sample data")
