"""
Media library data access
"""
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.apps.media.models import MediaFile
from app.apps.media.schemas import MediaCreate


async def list_media(session: AsyncSession) -> List[MediaFile]:
    """Newest first"""
    result = await session.execute(
        select(MediaFile).order_by(MediaFile.created_at.desc(), MediaFile.id.desc())
    )
    return list(result.scalars().all())


async def get_media_by_id(session: AsyncSession, media_id: int) -> Optional[MediaFile]:
    return await session.get(MediaFile, media_id)


async def insert_media(session: AsyncSession, data: MediaCreate) -> MediaFile:
    media = MediaFile(**data.model_dump())
    session.add(media)
    await session.commit()
    await session.refresh(media)
    return media


async def delete_media(session: AsyncSession, media_id: int) -> Optional[MediaFile]:
    """
    Remove the row and return what it held, so the caller can remove the
    stored file. Returns None when the row was already gone.
    """
    media = await session.get(MediaFile, media_id)
    if media is None:
        return None

    await session.delete(media)
    await session.commit()
    return media


async def count_media(session: AsyncSession) -> int:
    result = await session.execute(select(func.count()).select_from(MediaFile))
    return result.scalar_one()
