"""
Import every table model so SQLModel.metadata knows about all of them
Used by Database.create_all and by alembic autogenerate
"""
from app.apps.authentication.models import AdminUser, AdminRole
from app.apps.blog.models import BlogPost, PostStatus
from app.apps.categories.models import BlogCategory
from app.apps.faq.models import FaqItem
from app.apps.leads.models import Lead, LeadStatus
from app.apps.media.models import MediaFile
from app.apps.settings.models import SiteSetting

__all__ = [
    "AdminUser",
    "AdminRole",
    "BlogPost",
    "PostStatus",
    "BlogCategory",
    "FaqItem",
    "Lead",
    "LeadStatus",
    "MediaFile",
    "SiteSetting",
]
