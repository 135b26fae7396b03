"""
Authentication models
Admin accounts for the CMS dashboard
"""
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import DateTime, Enum as SAEnum, func, true
from typing import Optional
from datetime import datetime
from enum import Enum


class AdminRole(str, Enum):
    admin = "admin"
    editor = "editor"


class AdminUser(SQLModel, table=True):
    """
    Admin user model
    Table: admin_users
    """
    __tablename__ = "admin_users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(max_length=320, unique=True, index=True)
    # Null only before the account has been set up
    password_hash: Optional[str] = Field(default=None, max_length=255)
    name: str = Field(max_length=255)
    role: AdminRole = Field(
        default=AdminRole.admin,
        sa_column=Column(
            SAEnum(AdminRole, name="admin_role"),
            nullable=False,
            server_default=AdminRole.admin.value,
        ),
    )
    is_active: bool = Field(default=True, sa_column_kwargs={"server_default": true()})
    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime(), sa_column_kwargs={"server_default": func.now()})
    last_signed_in: Optional[datetime] = Field(default=None, sa_type=DateTime())
