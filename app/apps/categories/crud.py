"""
Blog category data access
"""
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.apps.categories.models import BlogCategory
from app.apps.categories.schemas import CategoryCreate, CategoryUpdate, CategoryWrite


async def list_categories(session: AsyncSession) -> List[BlogCategory]:
    """Ordered by sort_order, ties broken by name"""
    result = await session.execute(
        select(BlogCategory).order_by(BlogCategory.sort_order, BlogCategory.name)
    )
    return list(result.scalars().all())


async def get_category_by_id(session: AsyncSession, category_id: int) -> Optional[BlogCategory]:
    return await session.get(BlogCategory, category_id)


async def get_category_by_slug(session: AsyncSession, slug: str) -> Optional[BlogCategory]:
    result = await session.execute(select(BlogCategory).where(BlogCategory.slug == slug))
    return result.scalar_one_or_none()


async def create_category(session: AsyncSession, data: CategoryCreate) -> BlogCategory:
    category = BlogCategory(**data.model_dump())
    session.add(category)
    await session.commit()
    await session.refresh(category)
    return category


async def update_category(session: AsyncSession, data: CategoryUpdate) -> Optional[BlogCategory]:
    category = await session.get(BlogCategory, data.id)
    if category is None:
        return None

    values = data.model_dump(exclude_unset=True, exclude={"id"})
    for key, value in values.items():
        if value is None and key != "description":
            continue
        setattr(category, key, value)

    await session.commit()
    await session.refresh(category)
    return category


async def upsert_category(session: AsyncSession, data: CategoryWrite) -> Optional[BlogCategory]:
    # Keyed by id, a duplicate slug on insert surfaces as IntegrityError
    if isinstance(data, CategoryUpdate):
        return await update_category(session, data)
    return await create_category(session, data)


async def delete_category(session: AsyncSession, category_id: int) -> bool:
    """Posts keep their category slug, nothing cascades"""
    result = await session.execute(delete(BlogCategory).where(BlogCategory.id == category_id))
    await session.commit()
    return result.rowcount > 0


async def count_categories(session: AsyncSession) -> int:
    result = await session.execute(select(func.count()).select_from(BlogCategory))
    return result.scalar_one()
