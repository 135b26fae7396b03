"""
Public router
Unauthenticated reads for the marketing site and the contact form
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from app.database import get_async_session
from app.apps.blog import crud as blog_crud
from app.apps.blog.models import PostStatus
from app.apps.blog.schemas import PostResponse
from app.apps.faq import crud as faq_crud
from app.apps.faq.schemas import FaqResponse
from app.apps.leads import crud as leads_crud
from app.apps.leads.schemas import LeadCreate, LeadResponse
from app.common.errors import internal_error

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[PostResponse], status_code=status.HTTP_200_OK)
async def published_posts(session: AsyncSession = Depends(get_async_session)):
    """
    Published posts only, newest first
    """
    try:
        return await blog_crud.list_posts(session, status=PostStatus.published)
    except Exception as e:
        raise internal_error("listing published posts", e)


@router.get("/posts/{slug}", response_model=Optional[PostResponse], status_code=status.HTTP_200_OK)
async def published_post_by_slug(slug: str, session: AsyncSession = Depends(get_async_session)):
    """
    A published post by slug; drafts and unknown slugs both give null
    """
    try:
        post = await blog_crud.get_post_by_slug(session, slug)
    except Exception as e:
        raise internal_error("getting published post", e)
    if post is None or not post.is_published:
        return None
    return post


@router.get("/faq", response_model=List[FaqResponse], status_code=status.HTTP_200_OK)
async def published_faq(session: AsyncSession = Depends(get_async_session)):
    try:
        return await faq_crud.list_faq(session, published_only=True)
    except Exception as e:
        raise internal_error("listing published FAQ", e)


@router.post("/leads", response_model=LeadResponse, status_code=status.HTTP_201_CREATED)
async def submit_lead(request: LeadCreate, session: AsyncSession = Depends(get_async_session)):
    """
    Contact form submission, stored with status new
    """
    try:
        lead = await leads_crud.create_lead(session, request)
        logger.info(f"Lead {lead.id} received (source: {lead.source})")
        return lead
    except Exception as e:
        await session.rollback()
        raise internal_error("storing lead", e)
