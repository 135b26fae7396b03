"""
Blog category models
"""
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import DateTime, Text, func, text
from typing import Optional
from datetime import datetime


class BlogCategory(SQLModel, table=True):
    """
    Blog category model
    Table: blog_categories
    """
    __tablename__ = "blog_categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    slug: str = Field(max_length=255, unique=True, index=True)
    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    sort_order: int = Field(default=0, sa_column_kwargs={"server_default": text("0")})
    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime(), sa_column_kwargs={"server_default": func.now()})
