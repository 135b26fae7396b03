"""
Lead models
Contact requests coming from the public site
"""
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import DateTime, Enum as SAEnum, Text, func
from typing import Optional
from datetime import datetime
from enum import Enum


class LeadStatus(str, Enum):
    new = "new"
    contacted = "contacted"
    converted = "converted"
    archived = "archived"


class Lead(SQLModel, table=True):
    """
    Lead model
    Table: leads
    """
    __tablename__ = "leads"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: Optional[str] = Field(default=None, max_length=320)
    phone: Optional[str] = Field(default=None, max_length=20)
    message: Optional[str] = Field(default=None, sa_column=Column(Text))
    source: Optional[str] = Field(default=None, max_length=128)
    status: LeadStatus = Field(
        default=LeadStatus.new,
        sa_column=Column(
            SAEnum(LeadStatus, name="lead_status"),
            nullable=False,
            index=True,
            server_default=LeadStatus.new.value,
        ),
    )
    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime(), sa_column_kwargs={"server_default": func.now()})
    updated_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime(), sa_column_kwargs={"server_default": func.now()})
