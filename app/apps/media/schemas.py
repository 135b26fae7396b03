"""
Pydantic schemas for media module
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class MediaCreate(BaseModel):
    """Record produced by the upload handler"""
    filename: str = Field(..., min_length=1, max_length=255)
    original_name: str = Field(..., max_length=255)
    mime_type: str = Field(..., min_length=1, max_length=128)
    size: int = Field(..., ge=0)
    url: str = Field(..., min_length=1, max_length=500)
    file_key: str = Field(..., min_length=1, max_length=500)
    alt: Optional[str] = Field(default=None, max_length=255)


class UploadedFileResponse(BaseModel):
    """Stored file metadata, not yet in the media library"""
    filename: str
    original_name: str
    mime_type: str
    size: int
    url: str
    file_key: str


class MediaResponse(BaseModel):
    id: int
    filename: str
    original_name: str
    mime_type: str
    size: int
    url: str
    file_key: str
    alt: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class MediaDeleteResponse(BaseModel):
    """
    Result of the two-step delete.
    media is null when the row was already gone; file_removed is False when
    the stored file could not be removed (orphan left behind).
    """
    media: Optional[MediaResponse] = None
    file_removed: bool = False
