"""
Pydantic schemas for dashboard module
"""
from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_posts: int
    published: int
    drafts: int
    scheduled: int
    archived: int
    total_categories: int
    total_media: int
    total_leads: int
    new_leads: int
    total_faq: int
