"""
Tests for lead endpoints
"""
from datetime import datetime

import pytest
from fastapi import status

from app.apps.leads import crud as leads_crud
from app.apps.leads.models import LeadStatus
from app.apps.leads.schemas import LeadCreate


async def submit_lead(client, **fields):
    payload = {"name": "Carlos", "email": "carlos@x.com", "phone": "+5215512345678", "source": "contact-form"}
    payload.update(fields)
    response = await client.post("/api/public/leads", json=payload)
    assert response.status_code == status.HTTP_201_CREATED, response.text
    return response.json()


class TestLeads:
    """Tests for /api/leads"""

    @pytest.mark.asyncio
    async def test_new_lead_has_status_new(self, client):
        lead = await submit_lead(client, message="I need advice")

        assert lead["status"] == "new"
        assert lead["message"] == "I need advice"
        assert lead["created_at"]

    @pytest.mark.asyncio
    async def test_list_newest_first(self, authenticated_client):
        first = await submit_lead(authenticated_client, name="First")
        second = await submit_lead(authenticated_client, name="Second")

        response = await authenticated_client.get("/api/leads")

        assert response.status_code == status.HTTP_200_OK
        assert [lead["id"] for lead in response.json()] == [second["id"], first["id"]]

    @pytest.mark.asyncio
    async def test_get_by_id(self, authenticated_client):
        lead = await submit_lead(authenticated_client)

        response = await authenticated_client.get(f"/api/leads/{lead['id']}")
        assert response.json()["email"] == "carlos@x.com"

        missing = await authenticated_client.get("/api/leads/999")
        assert missing.status_code == status.HTTP_200_OK
        assert missing.json() is None

    @pytest.mark.asyncio
    async def test_update_status(self, authenticated_client):
        lead = await submit_lead(authenticated_client)

        response = await authenticated_client.post(
            "/api/leads/update-status",
            json={"id": lead["id"], "status": "contacted"},
        )

        assert response.status_code == status.HTTP_200_OK
        updated = response.json()
        assert updated["status"] == "contacted"
        assert datetime.fromisoformat(updated["updated_at"]) > datetime.fromisoformat(updated["created_at"])

    @pytest.mark.asyncio
    async def test_update_status_of_missing_lead(self, authenticated_client):
        response = await authenticated_client.post(
            "/api/leads/update-status",
            json={"id": 999, "status": "converted"},
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_update_status_rejects_unknown_status(self, authenticated_client):
        lead = await submit_lead(authenticated_client)

        response = await authenticated_client.post(
            "/api/leads/update-status",
            json={"id": lead["id"], "status": "won"},
        )
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, authenticated_client):
        lead = await submit_lead(authenticated_client)

        first = await authenticated_client.delete(f"/api/leads/{lead['id']}")
        second = await authenticated_client.delete(f"/api/leads/{lead['id']}")

        assert first.json() == {"success": True, "deleted": True}
        assert second.json() == {"success": True, "deleted": False}

    @pytest.mark.asyncio
    async def test_admin_listing_requires_session(self, client):
        await submit_lead(client)

        response = await client.get("/api/leads")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_converted_lead_shows_in_listing(self, authenticated_client):
        lead = await submit_lead(authenticated_client, name="João", email=None)
        assert lead["status"] == "new"

        await authenticated_client.post(
            "/api/leads/update-status",
            json={"id": lead["id"], "status": "converted"},
        )

        listing = (await authenticated_client.get("/api/leads")).json()
        assert listing[0]["name"] == "João"
        assert listing[0]["status"] == "converted"
        assert datetime.fromisoformat(listing[0]["updated_at"]) > datetime.fromisoformat(listing[0]["created_at"])

    @pytest.mark.asyncio
    async def test_out_of_range_ids_are_rejected(self, authenticated_client):
        update = await authenticated_client.post(
            "/api/leads/update-status",
            json={"id": 2**70, "status": "new"},
        )
        read = await authenticated_client.get(f"/api/leads/{2**70}")
        delete = await authenticated_client.delete("/api/leads/0")

        assert update.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert read.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert delete.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


class TestLeadStore:
    """Lead rows read back through a fresh session"""

    @pytest.mark.asyncio
    async def test_timestamps_round_trip(self, test_db, test_session):
        lead = await leads_crud.create_lead(test_session, LeadCreate(name="Ana"))
        updated = await leads_crud.update_lead_status(test_session, lead.id, LeadStatus.contacted)

        async with test_db.session_factory() as session:
            stored = await leads_crud.get_lead_by_id(session, lead.id)

        assert stored.created_at == lead.created_at
        assert stored.updated_at == updated.updated_at
        assert stored.created_at.tzinfo is None
        assert stored.status == LeadStatus.contacted
