"""
Shared pytest fixtures and configuration
"""
import os

# Settings are read at import time, set them before the app is imported
os.environ["MODE"] = "development"
os.environ["JWT_SECRET"] = "test-secret-key-with-enough-length-for-hs256"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Database, get_async_session
from app.apps.authentication import crud as auth_crud
from app.apps.authentication.models import AdminUser
from app.apps.authentication.security import hash_password
from app.apps.media.storage import LocalMediaStorage, get_media_storage


# In-memory SQLite database for testing
# Note: aiosqlite must be installed for async SQLite support
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_EMAIL = "a@x.com"
ADMIN_PASSWORD = "pw123456"
ADMIN_NAME = "Ana"


@pytest.fixture(scope="function")
async def test_db() -> AsyncGenerator[Database, None]:
    """
    Fresh store for each test, tables created from the models.
    """
    db = Database(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await db.create_all()
    yield db
    await db.drop_all()
    await db.disconnect()


@pytest.fixture(scope="function")
async def test_session(test_db: Database) -> AsyncGenerator[AsyncSession, None]:
    """
    Session for seeding data directly through the data access layer.
    """
    async with test_db.session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def media_storage(tmp_path) -> LocalMediaStorage:
    return LocalMediaStorage(tmp_path / "uploads")


@pytest.fixture(scope="function")
async def client(test_db: Database, media_storage: LocalMediaStorage) -> AsyncGenerator[AsyncClient, None]:
    """
    Anonymous client with the store and the media storage overridden.
    """
    async def override_get_async_session():
        async with test_db.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_async_session] = override_get_async_session
    app.dependency_overrides[get_media_storage] = lambda: media_storage

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as test_client:
        yield test_client

    # Cleanup
    app.dependency_overrides.clear()


@pytest.fixture
async def admin_user(test_session: AsyncSession) -> AdminUser:
    """
    The first admin, created the way setup does it.
    """
    return await auth_crud.create_admin(
        test_session,
        email=ADMIN_EMAIL,
        password_hash=hash_password(ADMIN_PASSWORD),
        name=ADMIN_NAME,
    )


@pytest.fixture
async def authenticated_client(client: AsyncClient, admin_user: AdminUser) -> AsyncClient:
    """
    Client holding a session cookie from a real login.
    """
    response = await client.post(
        "/api/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200, response.text
    return client
