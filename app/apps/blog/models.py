"""
Blog models
"""
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import DateTime, Enum as SAEnum, Text, func, false
from typing import Optional
from datetime import datetime
from enum import Enum


class PostStatus(str, Enum):
    draft = "draft"
    published = "published"
    scheduled = "scheduled"
    archived = "archived"


class BlogPost(SQLModel, table=True):
    """
    Blog post model
    Table: blog_posts

    is_published mirrors status == published and is recomputed on every write.
    category holds a category slug, it is not a foreign key.
    """
    __tablename__ = "blog_posts"

    id: Optional[int] = Field(default=None, primary_key=True)
    slug: str = Field(max_length=255, unique=True, index=True)
    title: str = Field(max_length=255)
    subtitle: Optional[str] = Field(default=None, max_length=500)
    excerpt: Optional[str] = Field(default=None, sa_column=Column(Text))
    content: Optional[str] = Field(default=None, sa_column=Column(Text))
    cover_image: Optional[str] = Field(default=None, max_length=500)
    cover_image_alt: Optional[str] = Field(default=None, max_length=255)
    video_url: Optional[str] = Field(default=None, max_length=500)
    author_name: Optional[str] = Field(default=None, max_length=255)
    category: Optional[str] = Field(default=None, max_length=128)
    tags: Optional[str] = Field(default=None, max_length=500)

    # SEO
    meta_title: Optional[str] = Field(default=None, max_length=255)
    meta_description: Optional[str] = Field(default=None, sa_column=Column(Text))
    meta_keywords: Optional[str] = Field(default=None, max_length=500)
    og_image: Optional[str] = Field(default=None, max_length=500)

    # Call to action
    cta_text: Optional[str] = Field(default=None, max_length=255)
    cta_url: Optional[str] = Field(default=None, max_length=500)

    status: PostStatus = Field(
        default=PostStatus.draft,
        sa_column=Column(
            SAEnum(PostStatus, name="post_status"),
            nullable=False,
            index=True,
            server_default=PostStatus.draft.value,
        ),
    )
    is_featured: bool = Field(default=False, sa_column_kwargs={"server_default": false()})
    is_published: bool = Field(default=False, sa_column_kwargs={"server_default": false()})
    published_at: Optional[datetime] = Field(default=None, sa_type=DateTime())
    scheduled_at: Optional[datetime] = Field(default=None, sa_type=DateTime())
    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime(), sa_column_kwargs={"server_default": func.now()})
    updated_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime(), sa_column_kwargs={"server_default": func.now()})
