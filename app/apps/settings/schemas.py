"""
Pydantic schemas for settings module
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class SettingUpsertRequest(BaseModel):
    key: str = Field(..., min_length=1, max_length=128)
    value: str


class SettingResponse(BaseModel):
    id: int
    setting_key: str
    setting_value: Optional[str] = None
    updated_at: datetime

    class Config:
        from_attributes = True


class SettingValueResponse(BaseModel):
    key: str
    value: Optional[str] = None
