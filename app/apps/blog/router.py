"""
Blog router
Admin procedures for blog posts
"""
from fastapi import APIRouter, Depends, Path, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from app.database import get_async_session
from app.apps.authentication.dependencies import require_admin
from app.apps.authentication.models import AdminUser
from app.apps.blog import crud
from app.apps.blog.schemas import PostResponse, PostUpsertRequest, PostUpdate
from app.common.fields import MAX_ID
from app.common.errors import conflict_error, internal_error, not_found_error
from app.common.schemas import DeleteResponse

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=List[PostResponse], status_code=status.HTTP_200_OK)
async def list_posts(session: AsyncSession = Depends(get_async_session)):
    """
    All posts, newest first
    """
    try:
        return await crud.list_posts(session)
    except Exception as e:
        raise internal_error("listing blog posts", e)


@router.get("/slug/{slug}", response_model=Optional[PostResponse], status_code=status.HTTP_200_OK)
async def get_post_by_slug(slug: str, session: AsyncSession = Depends(get_async_session)):
    """
    Post by slug, null when absent
    """
    try:
        return await crud.get_post_by_slug(session, slug)
    except Exception as e:
        raise internal_error("getting blog post by slug", e)


@router.get("/{post_id}", response_model=Optional[PostResponse], status_code=status.HTTP_200_OK)
async def get_post_by_id(
    post_id: int = Path(..., ge=1, le=MAX_ID),
    session: AsyncSession = Depends(get_async_session),
):
    """
    Post by id, null when absent
    """
    try:
        return await crud.get_post_by_id(session, post_id)
    except Exception as e:
        raise internal_error("getting blog post", e)


@router.post("/upsert", response_model=PostResponse, status_code=status.HTTP_200_OK)
async def upsert_post(
    request: PostUpsertRequest,
    session: AsyncSession = Depends(get_async_session),
    current_admin: AdminUser = Depends(require_admin),
):
    """
    Create a post (no id) or update one (id). Publication state follows status.
    """
    data = request.to_write()
    action = "Updating" if isinstance(data, PostUpdate) else "Creating"
    logger.info(f"{action} blog post '{request.slug}' (admin {current_admin.id})")

    try:
        post = await crud.upsert_post(session, data)
        if post is None:
            raise not_found_error("Blog post", request.id)
        return post

    except HTTPException:
        raise
    except IntegrityError as e:
        await session.rollback()
        raise conflict_error("Blog post with this slug", e)
    except Exception as e:
        await session.rollback()
        raise internal_error("upserting blog post", e)


@router.delete("/{post_id}", response_model=DeleteResponse, status_code=status.HTTP_200_OK)
async def delete_post(
    post_id: int = Path(..., ge=1, le=MAX_ID),
    session: AsyncSession = Depends(get_async_session),
):
    """
    Hard delete. Deleting a missing post is a no-op.
    """
    try:
        deleted = await crud.delete_post(session, post_id)
        logger.info(f"Blog post {post_id} delete requested (deleted: {deleted})")
        return DeleteResponse(deleted=deleted)
    except Exception as e:
        await session.rollback()
        raise internal_error("deleting blog post", e)
