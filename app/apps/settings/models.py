"""
Site settings models
Free-form key/value store for site-wide configuration
"""
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import DateTime, Text, func
from typing import Optional
from datetime import datetime


class SiteSetting(SQLModel, table=True):
    """
    Site setting model
    Table: site_settings
    """
    __tablename__ = "site_settings"

    id: Optional[int] = Field(default=None, primary_key=True)
    setting_key: str = Field(max_length=128, unique=True, index=True)
    setting_value: Optional[str] = Field(default=None, sa_column=Column(Text))
    updated_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime(), sa_column_kwargs={"server_default": func.now()})
