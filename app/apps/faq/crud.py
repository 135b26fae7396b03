"""
FAQ data access
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.apps.faq.models import FaqItem
from app.apps.faq.schemas import FaqCreate, FaqUpdate, FaqWrite


async def list_faq(session: AsyncSession, published_only: bool = False) -> List[FaqItem]:
    """Ordered by sort_order, ties broken by id"""
    stmt = select(FaqItem).order_by(FaqItem.sort_order, FaqItem.id)
    if published_only:
        stmt = stmt.where(FaqItem.is_published == True)  # noqa: E712
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_faq_by_id(session: AsyncSession, faq_id: int) -> Optional[FaqItem]:
    return await session.get(FaqItem, faq_id)


async def create_faq(session: AsyncSession, data: FaqCreate) -> FaqItem:
    item = FaqItem(**data.model_dump())
    session.add(item)
    await session.commit()
    await session.refresh(item)
    return item


async def update_faq(session: AsyncSession, data: FaqUpdate) -> Optional[FaqItem]:
    item = await session.get(FaqItem, data.id)
    if item is None:
        return None

    for key, value in data.model_dump(exclude_unset=True, exclude={"id"}).items():
        if value is None and key != "category":
            continue
        setattr(item, key, value)
    item.updated_at = datetime.now()

    await session.commit()
    await session.refresh(item)
    return item


async def upsert_faq(session: AsyncSession, data: FaqWrite) -> Optional[FaqItem]:
    if isinstance(data, FaqUpdate):
        return await update_faq(session, data)
    return await create_faq(session, data)


async def delete_faq(session: AsyncSession, faq_id: int) -> bool:
    result = await session.execute(delete(FaqItem).where(FaqItem.id == faq_id))
    await session.commit()
    return result.rowcount > 0


async def count_faq(session: AsyncSession) -> int:
    result = await session.execute(select(func.count()).select_from(FaqItem))
    return result.scalar_one()
