"""
Media library models
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime, func
from typing import Optional
from datetime import datetime


class MediaFile(SQLModel, table=True):
    """
    Media file model
    Table: media_files

    Rows describe files stored by the upload handler; file_key locates the bytes.
    """
    __tablename__ = "media_files"

    id: Optional[int] = Field(default=None, primary_key=True)
    filename: str = Field(max_length=255)
    original_name: str = Field(max_length=255)
    mime_type: str = Field(max_length=128)
    size: int = Field(ge=0)  # bytes
    url: str = Field(max_length=500)
    file_key: str = Field(max_length=500)
    alt: Optional[str] = Field(default=None, max_length=255)
    created_at: datetime = Field(default_factory=datetime.now, sa_type=DateTime(), sa_column_kwargs={"server_default": func.now()})
