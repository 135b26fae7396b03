"""
Dashboard rollups composed from the per-resource data access functions
Nothing is cached, every call reads the store again
"""
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.apps.blog.crud import count_posts, list_posts
from app.apps.blog.models import BlogPost, PostStatus
from app.apps.categories.crud import count_categories
from app.apps.dashboard.schemas import DashboardStats
from app.apps.faq.crud import count_faq
from app.apps.leads.crud import count_leads, list_leads
from app.apps.leads.models import Lead, LeadStatus
from app.apps.media.crud import count_media

RECENT_LIMIT = 5


async def get_dashboard_stats(session: AsyncSession) -> DashboardStats:
    return DashboardStats(
        total_posts=await count_posts(session),
        published=await count_posts(session, PostStatus.published),
        drafts=await count_posts(session, PostStatus.draft),
        scheduled=await count_posts(session, PostStatus.scheduled),
        archived=await count_posts(session, PostStatus.archived),
        total_categories=await count_categories(session),
        total_media=await count_media(session),
        total_leads=await count_leads(session),
        new_leads=await count_leads(session, LeadStatus.new),
        total_faq=await count_faq(session),
    )


async def get_recent_posts(session: AsyncSession) -> List[BlogPost]:
    return (await list_posts(session))[:RECENT_LIMIT]


async def get_recent_leads(session: AsyncSession) -> List[Lead]:
    return (await list_leads(session))[:RECENT_LIMIT]
