"""
Database connection and session management
Using SQLModel with asyncpg for async PostgreSQL operations
"""
from sqlmodel import SQLModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from typing import AsyncGenerator, Optional, Dict, Any
import ssl
import os
import logging
from app.config import DATABASE_URL, DB_SSL_CERT_PATH, DEBUG, MODE

logger = logging.getLogger(__name__)


def to_async_url(url: str) -> str:
    """Convert postgresql:// to postgresql+asyncpg:// for async operations"""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def build_ssl_context(cert_path: Optional[str]) -> Optional[ssl.SSLContext]:
    """
    Build an SSL context for asyncpg from a CA certificate file.
    Returns None when no usable certificate is configured.
    """
    if not cert_path:
        return None
    if not os.path.exists(cert_path) or os.path.getsize(cert_path) == 0:
        logger.warning(f"SSL certificate file missing or empty: {cert_path}")
        return None

    logger.info(f"Loading SSL certificate from: {cert_path}")
    context = ssl.create_default_context(cafile=cert_path)
    # Managed databases are reached through proxies, hostname is not verified
    context.check_hostname = False
    context.verify_mode = ssl.CERT_REQUIRED
    return context


class Database:
    """
    Store handle: owns the async engine and the session factory.

    Built explicitly with a URL so tests can swap in an in-memory store.
    The engine is created on connect() and disposed on disconnect().
    """

    def __init__(self, url: str, echo: bool = False, connect_args: Optional[Dict[str, Any]] = None, **engine_kwargs):
        self.url = to_async_url(url)
        self.echo = echo
        self.connect_args = connect_args or {}
        self.engine_kwargs = engine_kwargs
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            self.connect()
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker:
        if self._session_factory is None:
            self.connect()
        return self._session_factory

    def connect(self) -> None:
        """Create the engine and session factory (no-op when already connected)"""
        if self._engine is not None:
            return
        self._engine = create_async_engine(
            self.url,
            echo=self.echo,
            connect_args=self.connect_args,
            **self.engine_kwargs,
        )
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        # Log URL without password
        logger.info(f"Database engine created: {self.url.split('@')[-1]}")

    async def create_all(self) -> None:
        """Create all tables known to SQLModel metadata"""
        import app.models  # noqa: F401  registers every table
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def drop_all(self) -> None:
        import app.models  # noqa: F401
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)

    async def disconnect(self) -> None:
        """Dispose the connection pool"""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database connections closed")


async def ping(session: AsyncSession) -> bool:
    """Run SELECT 1, useful for health checks and debugging"""
    try:
        result = await session.execute(text("SELECT 1"))
        return result.scalar() == 1
    except Exception as e:
        logger.error(f"Database connection test failed: {e}", exc_info=True)
        await session.rollback()
        return False


def build_database() -> Database:
    """Build the process store handle from configuration"""
    async_url = to_async_url(DATABASE_URL)
    if not async_url.startswith("postgresql+asyncpg://"):
        return Database(async_url, echo=DEBUG)

    connect_args: Dict[str, Any] = {
        "command_timeout": 30,
        "server_settings": {"application_name": "lawfirm_cms_admin"},
    }
    ssl_config = build_ssl_context(DB_SSL_CERT_PATH)
    if ssl_config:
        connect_args["ssl"] = ssl_config
        logger.info("SSL enabled for database connections")

    return Database(
        async_url,
        echo=DEBUG,
        connect_args=connect_args,
        pool_pre_ping=True,  # Verify connections before using
        pool_recycle=3600,
        pool_timeout=30,
        pool_size=10,
        max_overflow=20,
    )


database = build_database()
logger.info(f"Database handle configured (mode: {MODE})")


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get async database session
    Usage: async def endpoint(session: AsyncSession = Depends(get_async_session))
    """
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
