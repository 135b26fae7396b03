"""
Tests for site settings endpoints
"""
import pytest
from fastapi import status

from app.apps.settings import crud as settings_crud


class TestSettings:
    """Tests for /api/settings"""

    @pytest.mark.asyncio
    async def test_unknown_key_is_null(self, authenticated_client):
        response = await authenticated_client.get("/api/settings/site_name")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"key": "site_name", "value": None}

    @pytest.mark.asyncio
    async def test_upsert_inserts_then_updates(self, authenticated_client):
        first = await authenticated_client.post(
            "/api/settings/upsert",
            json={"key": "phone", "value": "+52 55 1234 5678"},
        )
        assert first.status_code == status.HTTP_200_OK

        second = await authenticated_client.post(
            "/api/settings/upsert",
            json={"key": "phone", "value": "+52 55 8765 4321"},
        )
        assert second.status_code == status.HTTP_200_OK
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["setting_value"] == "+52 55 8765 4321"

        value = await authenticated_client.get("/api/settings/phone")
        assert value.json()["value"] == "+52 55 8765 4321"

        listing = await authenticated_client.get("/api/settings")
        assert len(listing.json()) == 1

    @pytest.mark.asyncio
    async def test_upsert_many(self, authenticated_client):
        response = await authenticated_client.post(
            "/api/settings/upsert-many",
            json=[
                {"key": "site_name", "value": "Garcia & Asociados"},
                {"key": "email", "value": "contacto@x.com"},
                {"key": "site_name", "value": "Garcia Abogados"},
            ],
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"ok": True}

        listing = (await authenticated_client.get("/api/settings")).json()
        values = {setting["setting_key"]: setting["setting_value"] for setting in listing}
        assert values == {"site_name": "Garcia Abogados", "email": "contacto@x.com"}

    @pytest.mark.asyncio
    async def test_upsert_many_empty_batch(self, authenticated_client):
        response = await authenticated_client.post("/api/settings/upsert-many", json=[])
        assert response.json() == {"ok": True}

    @pytest.mark.asyncio
    async def test_invalid_item_rejects_whole_batch(self, authenticated_client):
        response = await authenticated_client.post(
            "/api/settings/upsert-many",
            json=[{"key": "site_name", "value": "x"}, {"key": "", "value": "y"}],
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert (await authenticated_client.get("/api/settings")).json() == []

    @pytest.mark.asyncio
    async def test_requires_session(self, client):
        response = await client.post("/api/settings/upsert", json={"key": "k", "value": "v"})
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_batch_failure_keeps_earlier_items(self, authenticated_client, monkeypatch):
        original_upsert = settings_crud.upsert_setting
        calls = []

        async def fail_on_second_item(session, key, value):
            calls.append(key)
            if len(calls) == 2:
                raise RuntimeError("connection to server at 10.0.0.5 lost")
            return await original_upsert(session, key, value)

        monkeypatch.setattr(settings_crud, "upsert_setting", fail_on_second_item)

        response = await authenticated_client.post(
            "/api/settings/upsert-many",
            json=[
                {"key": "site_name", "value": "Garcia Abogados"},
                {"key": "email", "value": "contacto@x.com"},
                {"key": "phone", "value": "+52 55 1234 5678"},
            ],
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "Internal server error"}
        assert calls == ["site_name", "email"]

        monkeypatch.undo()
        listing = (await authenticated_client.get("/api/settings")).json()
        assert {setting["setting_key"]: setting["setting_value"] for setting in listing} == {
            "site_name": "Garcia Abogados",
        }
