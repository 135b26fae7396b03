"""
Site settings data access
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.apps.settings.models import SiteSetting

# Dialects with INSERT ... ON CONFLICT DO UPDATE
UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


async def list_settings(session: AsyncSession) -> List[SiteSetting]:
    """No defined order"""
    result = await session.execute(select(SiteSetting))
    return list(result.scalars().all())


async def get_setting_row(session: AsyncSession, key: str) -> Optional[SiteSetting]:
    result = await session.execute(select(SiteSetting).where(SiteSetting.setting_key == key))
    return result.scalar_one_or_none()


async def get_setting(session: AsyncSession, key: str) -> Optional[str]:
    """Value of a setting, None when the key is unknown or holds null"""
    setting = await get_setting_row(session, key)
    return setting.setting_value if setting is not None else None


async def upsert_setting(session: AsyncSession, key: str, value: Optional[str]) -> SiteSetting:
    """
    Insert the key or overwrite its value in a single atomic statement.

    Keyed by setting_key (not id): a second write to the same key updates it.
    """
    now = datetime.now()
    insert = UPSERT_INSERTS[session.bind.dialect.name]
    stmt = insert(SiteSetting).values(setting_key=key, setting_value=value, updated_at=now)
    stmt = stmt.on_conflict_do_update(
        index_elements=[SiteSetting.setting_key],
        set_={"setting_value": value, "updated_at": now},
    )
    await session.execute(stmt)
    await session.commit()

    setting = await get_setting_row(session, key)
    # The identity map may hold a copy loaded before the write
    await session.refresh(setting)
    return setting
