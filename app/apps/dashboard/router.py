"""
Dashboard router
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from app.database import get_async_session
from app.apps.authentication.dependencies import require_admin
from app.apps.blog.schemas import PostResponse
from app.apps.dashboard import service
from app.apps.dashboard.schemas import DashboardStats
from app.apps.leads.schemas import LeadResponse
from app.common.errors import internal_error

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/stats", response_model=DashboardStats, status_code=status.HTTP_200_OK)
async def stats(session: AsyncSession = Depends(get_async_session)):
    try:
        return await service.get_dashboard_stats(session)
    except Exception as e:
        raise internal_error("computing dashboard stats", e)


@router.get("/recent-leads", response_model=List[LeadResponse], status_code=status.HTTP_200_OK)
async def recent_leads(session: AsyncSession = Depends(get_async_session)):
    try:
        return await service.get_recent_leads(session)
    except Exception as e:
        raise internal_error("listing recent leads", e)


@router.get("/recent-posts", response_model=List[PostResponse], status_code=status.HTTP_200_OK)
async def recent_posts(session: AsyncSession = Depends(get_async_session)):
    try:
        return await service.get_recent_posts(session)
    except Exception as e:
        raise internal_error("listing recent posts", e)
