"""
Blog post data access
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.apps.blog.models import BlogPost, PostStatus
from app.apps.blog.schemas import PostCreate, PostUpdate, PostWrite

# Columns that cannot be cleared through an update
REQUIRED_COLUMNS = {"slug", "title", "status", "is_featured"}


def apply_publication_state(values: Dict[str, Any], current: Optional[BlogPost] = None) -> Dict[str, Any]:
    """
    Keep is_published and published_at consistent with status.

    published sets is_published and stamps published_at when none is given
    and the post has none yet; any other status clears is_published.
    An update that does not touch status leaves both fields alone.
    """
    status = values.get("status")
    if status is None:
        values.pop("is_published", None)
        return values

    if status == PostStatus.published:
        values["is_published"] = True
        if values.get("published_at") is None:
            existing = current.published_at if current is not None and current.is_published else None
            values["published_at"] = existing or datetime.now()
    else:
        values["is_published"] = False
    return values


async def list_posts(session: AsyncSession, status: Optional[PostStatus] = None) -> List[BlogPost]:
    """Newest first"""
    stmt = select(BlogPost).order_by(BlogPost.created_at.desc(), BlogPost.id.desc())
    if status is not None:
        stmt = stmt.where(BlogPost.status == status)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_post_by_id(session: AsyncSession, post_id: int) -> Optional[BlogPost]:
    return await session.get(BlogPost, post_id)


async def get_post_by_slug(session: AsyncSession, slug: str) -> Optional[BlogPost]:
    result = await session.execute(select(BlogPost).where(BlogPost.slug == slug))
    return result.scalar_one_or_none()


async def create_post(session: AsyncSession, data: PostCreate) -> BlogPost:
    values = apply_publication_state(data.model_dump(exclude_none=True))
    post = BlogPost(**values)
    session.add(post)
    await session.commit()
    await session.refresh(post)
    return post


async def update_post(session: AsyncSession, data: PostUpdate) -> Optional[BlogPost]:
    """Returns None when no post has data.id"""
    post = await session.get(BlogPost, data.id)
    if post is None:
        return None

    values = data.model_dump(exclude_unset=True, exclude={"id"})
    values = {k: v for k, v in values.items() if v is not None or k not in REQUIRED_COLUMNS}
    values = apply_publication_state(values, current=post)

    for key, value in values.items():
        setattr(post, key, value)
    post.updated_at = datetime.now()

    await session.commit()
    await session.refresh(post)
    return post


async def upsert_post(session: AsyncSession, data: PostWrite) -> Optional[BlogPost]:
    """Update when the payload carries an id, insert otherwise"""
    if isinstance(data, PostUpdate):
        return await update_post(session, data)
    return await create_post(session, data)


async def delete_post(session: AsyncSession, post_id: int) -> bool:
    result = await session.execute(delete(BlogPost).where(BlogPost.id == post_id))
    await session.commit()
    return result.rowcount > 0


async def count_posts(session: AsyncSession, status: Optional[PostStatus] = None) -> int:
    stmt = select(func.count()).select_from(BlogPost)
    if status is not None:
        stmt = stmt.where(BlogPost.status == status)
    result = await session.execute(stmt)
    return result.scalar_one()
