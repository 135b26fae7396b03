"""
Pydantic schemas for categories module
"""
from pydantic import BaseModel, Field
from typing import Optional, Union
from datetime import datetime

from app.common.fields import MAX_ID


class CategoryCreate(BaseModel):
    slug: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    sort_order: int = 0


class CategoryUpdate(BaseModel):
    id: int = Field(..., ge=1, le=MAX_ID)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=255)
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    sort_order: Optional[int] = None


CategoryWrite = Union[CategoryCreate, CategoryUpdate]


class CategoryUpsertRequest(BaseModel):
    """categories.upsert input: update when id is present, insert otherwise"""
    id: Optional[int] = Field(default=None, ge=1, le=MAX_ID)
    slug: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    sort_order: Optional[int] = None

    def to_write(self) -> CategoryWrite:
        values = self.model_dump(exclude_unset=True, exclude={"id"})
        if values.get("sort_order") is None:
            values.pop("sort_order", None)
        if self.id is None:
            return CategoryCreate(**values)
        return CategoryUpdate(id=self.id, **values)


class CategoryResponse(BaseModel):
    id: int
    slug: str
    name: str
    description: Optional[str] = None
    sort_order: int
    created_at: datetime

    class Config:
        from_attributes = True
