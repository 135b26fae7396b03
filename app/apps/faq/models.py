"""
FAQ models
"""
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import DateTime, Text, func, text, true
from typing import Optional
from datetime import datetime


class FaqItem(SQLModel, table=True):
    """
    FAQ item model
    Table: faq_items
    """
    __tablename__ = "faq_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    question: str = Field(sa_column=Column(Text, nullable=False))
    answer: str = Field(sa_column=Column(Text, nullable=False))
    category: Optional[str] = Field(default=None, max_length=128)
    is_published: bool = Field(default=True, sa_column_kwargs={"server_default": true()})
    sort_order: int = Field(default=0, sa_column_kwargs={"server_default": text("0")})
    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime(), sa_column_kwargs={"server_default": func.now()})
    updated_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime(), sa_column_kwargs={"server_default": func.now()})
