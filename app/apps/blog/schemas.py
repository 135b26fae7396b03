"""
Pydantic schemas for blog module
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, Union
from datetime import datetime

from app.apps.blog.models import PostStatus
from app.common.fields import MAX_ID, to_naive_datetime


class PostFields(BaseModel):
    """Optional content fields shared by create and update shapes"""
    subtitle: Optional[str] = Field(default=None, max_length=500)
    excerpt: Optional[str] = None
    content: Optional[str] = None
    cover_image: Optional[str] = Field(default=None, max_length=500)
    cover_image_alt: Optional[str] = Field(default=None, max_length=255)
    video_url: Optional[str] = Field(default=None, max_length=500)
    author_name: Optional[str] = Field(default=None, max_length=255)
    category: Optional[str] = Field(default=None, max_length=128)
    tags: Optional[str] = Field(default=None, max_length=500)
    meta_title: Optional[str] = Field(default=None, max_length=255)
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = Field(default=None, max_length=500)
    og_image: Optional[str] = Field(default=None, max_length=500)
    cta_text: Optional[str] = Field(default=None, max_length=255)
    cta_url: Optional[str] = Field(default=None, max_length=500)
    is_featured: Optional[bool] = None
    published_at: Optional[datetime] = None
    scheduled_at: Optional[datetime] = None

    @field_validator("published_at", "scheduled_at")
    @classmethod
    def normalize_datetime(cls, value: Optional[datetime]) -> Optional[datetime]:
        return to_naive_datetime(value)


class PostCreate(PostFields):
    """Insert shape: slug and title are required, status defaults to draft"""
    slug: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    status: PostStatus = PostStatus.draft


class PostUpdate(PostFields):
    """Update shape: only the fields that are set are written"""
    id: int = Field(..., ge=1, le=MAX_ID)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=255)
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    status: Optional[PostStatus] = None


PostWrite = Union[PostCreate, PostUpdate]


class PostUpsertRequest(PostFields):
    """
    blog.upsert input: update when id is present, insert otherwise.
    is_published is accepted for compatibility and always recomputed from status.
    """
    id: Optional[int] = Field(default=None, ge=1, le=MAX_ID)
    slug: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    status: Optional[PostStatus] = None
    is_published: Optional[bool] = None

    def to_write(self) -> PostWrite:
        values = self.model_dump(exclude_unset=True, exclude={"id", "is_published"})
        if values.get("status") is None:
            values.pop("status", None)
        if self.id is None:
            return PostCreate(**values)
        return PostUpdate(id=self.id, **values)


class PostResponse(BaseModel):
    """Blog post response schema"""
    id: int
    slug: str
    title: str
    subtitle: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    cover_image: Optional[str] = None
    cover_image_alt: Optional[str] = None
    video_url: Optional[str] = None
    author_name: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None
    og_image: Optional[str] = None
    cta_text: Optional[str] = None
    cta_url: Optional[str] = None
    status: PostStatus
    is_featured: bool
    is_published: bool
    published_at: Optional[datetime] = None
    scheduled_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
