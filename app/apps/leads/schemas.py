"""
Pydantic schemas for leads module
"""
from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime

from app.apps.leads.models import LeadStatus
from app.common.fields import MAX_ID


class LeadCreate(BaseModel):
    """Contact form submission"""
    name: str = Field(..., min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    message: Optional[str] = None
    source: Optional[str] = Field(default=None, max_length=128)


class LeadStatusUpdate(BaseModel):
    id: int = Field(..., ge=1, le=MAX_ID)
    status: LeadStatus


class LeadResponse(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    message: Optional[str] = None
    source: Optional[str] = None
    status: LeadStatus
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
