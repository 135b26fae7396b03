"""
Tests for blog category endpoints
"""
import pytest
from fastapi import status


class TestCategories:
    """Tests for /api/categories"""

    @pytest.mark.asyncio
    async def test_create_and_list_in_sort_order(self, authenticated_client):
        for slug, name, sort_order in [("family", "Family", 2), ("criminal", "Criminal", 1), ("civil", "Civil", 2)]:
            response = await authenticated_client.post(
                "/api/categories/upsert",
                json={"slug": slug, "name": name, "sort_order": sort_order},
            )
            assert response.status_code == status.HTTP_200_OK

        response = await authenticated_client.get("/api/categories")

        assert response.status_code == status.HTTP_200_OK
        assert [category["slug"] for category in response.json()] == ["criminal", "civil", "family"]

    @pytest.mark.asyncio
    async def test_sort_order_defaults_to_zero(self, authenticated_client):
        response = await authenticated_client.post(
            "/api/categories/upsert",
            json={"slug": "tax", "name": "Tax"},
        )
        assert response.json()["sort_order"] == 0

    @pytest.mark.asyncio
    async def test_update_by_id(self, authenticated_client):
        created = (await authenticated_client.post(
            "/api/categories/upsert",
            json={"slug": "labor", "name": "Labor", "description": "Work law"},
        )).json()

        response = await authenticated_client.post(
            "/api/categories/upsert",
            json={"id": created["id"], "slug": "labor", "name": "Labor law", "sort_order": 5},
        )

        assert response.status_code == status.HTTP_200_OK
        updated = response.json()
        assert updated["id"] == created["id"]
        assert updated["name"] == "Labor law"
        assert updated["sort_order"] == 5
        assert updated["description"] == "Work law"

    @pytest.mark.asyncio
    async def test_duplicate_slug_without_id_is_conflict(self, authenticated_client):
        await authenticated_client.post("/api/categories/upsert", json={"slug": "tax", "name": "Tax"})

        response = await authenticated_client.post(
            "/api/categories/upsert",
            json={"slug": "tax", "name": "Taxes"},
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        listing = (await authenticated_client.get("/api/categories")).json()
        assert [category["name"] for category in listing] == ["Tax"]

    @pytest.mark.asyncio
    async def test_update_missing_category(self, authenticated_client):
        response = await authenticated_client.post(
            "/api/categories/upsert",
            json={"id": 404, "slug": "ghost", "name": "Ghost"},
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, authenticated_client):
        created = (await authenticated_client.post(
            "/api/categories/upsert",
            json={"slug": "tax", "name": "Tax"},
        )).json()

        first = await authenticated_client.delete(f"/api/categories/{created['id']}")
        second = await authenticated_client.delete(f"/api/categories/{created['id']}")

        assert first.json() == {"success": True, "deleted": True}
        assert second.json() == {"success": True, "deleted": False}
        assert (await authenticated_client.get("/api/categories")).json() == []

    @pytest.mark.asyncio
    async def test_requires_session(self, client):
        response = await client.get("/api/categories")
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_same_slug_twice_without_id(self, authenticated_client):
        first = await authenticated_client.post(
            "/api/categories/upsert",
            json={"slug": "tributario", "name": "Direito Tributário"},
        )
        assert first.status_code == status.HTTP_200_OK
        assert first.json()["id"]

        second = await authenticated_client.post(
            "/api/categories/upsert",
            json={"slug": "tributario", "name": "Direito Tributário"},
        )
        assert second.status_code == status.HTTP_409_CONFLICT

    @pytest.mark.asyncio
    async def test_out_of_range_ids_are_rejected(self, authenticated_client):
        upsert = await authenticated_client.post(
            "/api/categories/upsert",
            json={"id": 2**70, "slug": "tax", "name": "Tax"},
        )
        delete = await authenticated_client.delete(f"/api/categories/{2**70}")

        assert upsert.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert delete.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
