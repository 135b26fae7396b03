"""
Tests for the upload handler, the media library and local storage
"""
import pytest
from fastapi import status

from app.apps.media.storage import LocalMediaStorage, UploadRejected, get_media_storage
from app.main import app

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


async def upload_and_register(client, name="photo.png", content=PNG_BYTES, content_type="image/png", alt=None):
    uploaded = await client.post(
        "/api/media/file",
        files={"file": (name, content, content_type)},
    )
    assert uploaded.status_code == status.HTTP_200_OK, uploaded.text
    record = uploaded.json()
    if alt is not None:
        record["alt"] = alt

    registered = await client.post("/api/media/upload", json=record)
    assert registered.status_code == status.HTTP_200_OK, registered.text
    return registered.json()


class TestLocalMediaStorage:
    """Storage rules, without HTTP"""

    def test_save_keeps_extension_and_writes_file(self, tmp_path):
        storage = LocalMediaStorage(tmp_path)

        record = storage.save(PNG_BYTES, "Office Photo.PNG", "image/png")

        assert record["filename"].endswith(".png")
        assert record["file_key"] == record["filename"]
        assert record["url"] == f"/uploads/{record['filename']}"
        assert record["size"] == len(PNG_BYTES)
        assert record["original_name"] == "Office Photo.PNG"
        assert (tmp_path / record["filename"]).read_bytes() == PNG_BYTES

    def test_rejects_unsupported_type(self, tmp_path):
        storage = LocalMediaStorage(tmp_path)
        with pytest.raises(UploadRejected):
            storage.save(b"%PDF-1.7", "brief.pdf", "application/pdf")

    def test_rejects_oversized_file(self, tmp_path):
        storage = LocalMediaStorage(tmp_path, max_size=10)
        with pytest.raises(UploadRejected):
            storage.save(b"x" * 11, "big.png", "image/png")

    def test_delete_reports_missing_file(self, tmp_path):
        storage = LocalMediaStorage(tmp_path)
        record = storage.save(PNG_BYTES, "a.png", "image/png")

        assert storage.delete(record["file_key"]) is True
        assert storage.delete(record["file_key"]) is False

    def test_delete_refuses_path_outside_upload_dir(self, tmp_path):
        storage = LocalMediaStorage(tmp_path / "uploads")
        with pytest.raises(ValueError):
            storage.delete("../secrets.txt")


class TestMediaEndpoints:
    """Tests for /api/media"""

    @pytest.mark.asyncio
    async def test_upload_and_register(self, authenticated_client, media_storage):
        media = await upload_and_register(authenticated_client, alt="Our office")

        assert media["id"]
        assert media["mime_type"] == "image/png"
        assert media["alt"] == "Our office"
        assert (media_storage.upload_dir / media["file_key"]).exists()

        listing = await authenticated_client.get("/api/media")
        assert [item["id"] for item in listing.json()] == [media["id"]]

    @pytest.mark.asyncio
    async def test_upload_rejects_unsupported_type(self, authenticated_client):
        response = await authenticated_client.post(
            "/api/media/file",
            files={"file": ("notes.txt", b"hello", "text/plain")},
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "Invalid file type" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_upload_requires_session(self, client):
        response = await client.post(
            "/api/media/file",
            files={"file": ("photo.png", PNG_BYTES, "image/png")},
        )
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_list_newest_first(self, authenticated_client):
        first = await upload_and_register(authenticated_client, name="one.png")
        second = await upload_and_register(authenticated_client, name="two.png")

        listing = await authenticated_client.get("/api/media")
        assert [item["id"] for item in listing.json()] == [second["id"], first["id"]]

    @pytest.mark.asyncio
    async def test_delete_removes_row_and_file(self, authenticated_client, media_storage):
        media = await upload_and_register(authenticated_client)

        response = await authenticated_client.delete(f"/api/media/{media['id']}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["media"]["id"] == media["id"]
        assert data["file_removed"] is True
        assert not (media_storage.upload_dir / media["file_key"]).exists()
        assert (await authenticated_client.get("/api/media")).json() == []

    @pytest.mark.asyncio
    async def test_delete_missing_media(self, authenticated_client):
        response = await authenticated_client.delete("/api/media/999")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"media": None, "file_removed": False}

    @pytest.mark.asyncio
    async def test_delete_when_file_already_gone(self, authenticated_client, media_storage):
        media = await upload_and_register(authenticated_client)
        (media_storage.upload_dir / media["file_key"]).unlink()

        response = await authenticated_client.delete(f"/api/media/{media['id']}")

        data = response.json()
        assert data["media"]["id"] == media["id"]
        assert data["file_removed"] is False
        assert (await authenticated_client.get("/api/media")).json() == []

    @pytest.mark.asyncio
    async def test_delete_out_of_range_id_is_rejected(self, authenticated_client):
        response = await authenticated_client.delete(f"/api/media/{2**70}")
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_upload_over_size_limit_is_rejected(self, authenticated_client, tmp_path):
        small_storage = LocalMediaStorage(tmp_path / "small", max_size=16)
        app.dependency_overrides[get_media_storage] = lambda: small_storage

        response = await authenticated_client.post(
            "/api/media/file",
            files={"file": ("big.png", PNG_BYTES, "image/png")},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "File too large" in response.json()["detail"]
        assert not (tmp_path / "small").exists()
