"""
Tests for the generic CRUD contract of the entity store
"""
import threading
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from agency_dash.models import (
    ClientCreate, ClientStatus, ClientUpdate, LeadStatus, PortfolioCategory, QuoteStatus,
)
from agency_dash.store import MemoryStore


@pytest.mark.unit
class TestCreateAndGet:
    """Tests for create followed by get"""

    def test_create_then_get_returns_equal_record(self, client_data):
        """Test that get returns exactly what create returned"""
        start = datetime.now(timezone.utc)
        store = MemoryStore()

        created = store.clients.create(client_data)

        assert created.id
        assert created.created_at >= start
        assert store.clients.get(created.id) == created

    def test_create_applies_defaults(self, store, client_data, quote_data):
        """Test that enum and scalar defaults are filled in"""
        client = store.clients.create(client_data)
        quote = store.quotes.create({**quote_data, "urgency_factor": "1.0"})
        item = store.portfolio_items.create({"title": "Logo", "category": "branding"})

        assert client.status == ClientStatus.active
        assert quote.status == QuoteStatus.pending
        assert item.featured is False
        assert item.category == PortfolioCategory.branding

    def test_quote_urgency_factor_defaults_to_one(self, store):
        quote = store.quotes.create({"base_amount": 1000, "total_amount": 1000})
        assert quote.urgency_factor == "1.0"
        assert quote.services is None
        assert quote.client_id is None

    def test_create_uses_store_clock(self, store, clock, client_data):
        assert store.clients.create(client_data).created_at == clock.now

    def test_create_accepts_model_payload(self, store, client_data):
        """Test that a create model works as well as a plain mapping"""
        client = store.clients.create(ClientCreate(**client_data))
        assert client.company_name == "Kwanza Design Lda"

    def test_caller_cannot_choose_id_or_created_at(self, store, clock, client_data):
        client = store.clients.create(
            {**client_data, "id": "fixed-id", "created_at": "2001-01-01T00:00:00Z"}
        )
        assert client.id != "fixed-id"
        assert client.created_at == clock.now

    def test_ids_are_unique(self, store, client_data):
        ids = {store.clients.create(client_data).id for _ in range(50)}
        assert len(ids) == 50

    def test_get_unknown_id_returns_none(self, store):
        assert store.clients.get("missing") is None

    def test_list_keeps_insertion_order(self, store, client_data):
        first = store.clients.create({**client_data, "company_name": "A"})
        second = store.clients.create({**client_data, "company_name": "B"})
        assert [c.id for c in store.clients.list()] == [first.id, second.id]

    def test_list_empty_store(self, store):
        assert store.leads.list() == []


@pytest.mark.unit
class TestValidation:
    """Tests for create-time validation"""

    def test_lead_without_source_is_rejected(self, store):
        with pytest.raises(ValidationError) as exc_info:
            store.leads.create({"company_name": "Sem Origem"})
        assert exc_info.value.errors()[0]["loc"] == ("source",)
        assert store.leads.list() == []

    def test_lead_with_only_source(self, store):
        lead = store.leads.create({"source": "facebook"})
        assert lead.source == "facebook"
        assert lead.status == LeadStatus.new
        assert lead.company_name is None
        assert lead.contact_name is None
        assert lead.email is None
        assert lead.phone is None
        assert lead.notes is None

    def test_invalid_client_status_is_rejected(self, store, client_data):
        with pytest.raises(ValidationError) as exc_info:
            store.clients.create({**client_data, "status": "archived"})
        assert exc_info.value.errors()[0]["loc"] == ("status",)

    def test_invalid_portfolio_category_is_rejected(self, store):
        with pytest.raises(ValidationError):
            store.portfolio_items.create({"title": "Video", "category": "video"})

    def test_portfolio_category_is_required(self, store):
        with pytest.raises(ValidationError):
            store.portfolio_items.create({"title": "Sem categoria"})

    def test_missing_required_client_fields(self, store):
        with pytest.raises(ValidationError) as exc_info:
            store.clients.create({"company_name": "Only Name"})
        missing = {error["loc"][0] for error in exc_info.value.errors()}
        assert missing == {"contact_name", "email", "phone", "location"}


@pytest.mark.unit
class TestUpdate:
    """Tests for partial update semantics"""

    def test_empty_update_changes_nothing(self, store, client_data):
        client = store.clients.create(client_data)
        assert store.clients.update(client.id, {}) == client
        assert store.clients.get(client.id) == client

    def test_update_leaves_absent_fields_untouched(self, store, client_data):
        client = store.clients.create(client_data)

        updated = store.clients.update(client.id, {"location": "Huambo"})

        assert updated.location == "Huambo"
        assert updated.phone == "+244 900 000 000"
        assert updated.company_name == client.company_name
        assert store.clients.get(client.id).location == "Huambo"

    def test_update_with_model_only_applies_sent_fields(self, store, client_data):
        client = store.clients.create(client_data)
        updated = store.clients.update(client.id, ClientUpdate(status="inactive"))
        assert updated.status == ClientStatus.inactive
        assert updated.location == "Luanda"

    def test_update_unknown_id_returns_none(self, store):
        assert store.clients.update("missing", {"location": "Huambo"}) is None

    def test_update_keeps_id_and_created_at(self, store, client_data):
        client = store.clients.create(client_data)
        updated = store.clients.update(
            client.id, {"id": "other", "created_at": "2001-01-01T00:00:00Z", "phone": "1"}
        )
        assert updated.id == client.id
        assert updated.created_at == client.created_at
        assert store.clients.get("other") is None

    def test_invalid_enum_on_update_leaves_record_unchanged(self, store, client_data):
        client = store.clients.create(client_data)
        with pytest.raises(ValidationError):
            store.clients.update(client.id, {"status": "archived", "location": "Huambo"})
        assert store.clients.get(client.id) == client

    def test_null_required_field_is_rejected(self, store, client_data):
        client = store.clients.create(client_data)
        with pytest.raises(ValidationError):
            store.clients.update(client.id, {"company_name": None})
        assert store.clients.get(client.id).company_name == "Kwanza Design Lda"

    def test_optional_field_can_be_cleared(self, store):
        lead = store.leads.create({"source": "instagram", "notes": "ligar segunda"})
        assert store.leads.update(lead.id, {"notes": None}).notes is None

    def test_quote_services_replaced_as_a_whole(self, store, quote_data):
        quote = store.quotes.create(quote_data)
        updated = store.quotes.update(quote.id, {"services": ["marketing", "documentation"]})
        assert updated.services == ["marketing", "documentation"]
        assert updated.total_amount == 30000


@pytest.mark.unit
class TestDelete:
    """Tests for delete"""

    def test_delete_returns_true_exactly_once(self, store, client_data):
        client = store.clients.create(client_data)

        assert store.clients.delete(client.id) is True
        assert store.clients.delete(client.id) is False
        assert store.clients.delete(client.id) is False
        assert store.clients.get(client.id) is None

    def test_delete_unknown_id(self, store):
        assert store.portfolio_items.delete("missing") is False

    def test_deleting_client_keeps_dependents(self, store, client_data, project_data):
        """Client references are soft: dependents are neither removed nor rejected"""
        client = store.clients.create(client_data)
        project = store.projects.create(project_data(client.id))
        item = store.portfolio_items.create(
            {"title": "Logo", "category": "branding", "client_id": client.id}
        )

        store.clients.delete(client.id)

        assert store.projects.get(project.id).client_id == client.id
        assert store.portfolio_items.get(item.id).client_id == client.id


@pytest.mark.unit
class TestIsolation:
    """Tests that callers cannot change stored state behind the store's back"""

    def test_mutating_returned_record_does_not_change_store(self, store, client_data):
        client = store.clients.create(client_data)
        client.location = "Lobito"

        fetched = store.clients.get(client.id)
        fetched.phone = "0"

        stored = store.clients.get(client.id)
        assert stored.location == "Luanda"
        assert stored.phone == "+244 900 000 000"

    def test_mutating_listed_services_does_not_change_store(self, store, quote_data):
        quote = store.quotes.create(quote_data)
        store.quotes.list()[0].services.append("assistant")
        assert store.quotes.get(quote.id).services == ["branding"]

    def test_concurrent_creates_are_all_kept(self, store, client_data):
        def worker():
            for _ in range(50):
                store.clients.create(client_data)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        clients = store.clients.list()
        assert len(clients) == 400
        assert len({c.id for c in clients}) == 400


@pytest.mark.unit
class TestLifecycle:
    def test_close_drops_records(self, client_data):
        store = MemoryStore()
        store.clients.create(client_data)
        store.leads.create({"source": "facebook"})

        store.close()

        assert store.closed
        assert store.clients.list() == []
        assert store.leads.list() == []

    def test_context_manager_closes_store(self):
        with MemoryStore() as store:
            assert not store.closed
        assert store.closed
