"""
Pydantic schemas for FAQ module
"""
from pydantic import BaseModel, Field
from typing import Optional, Union
from datetime import datetime

from app.common.fields import MAX_ID


class FaqCreate(BaseModel):
    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)
    category: Optional[str] = Field(default=None, max_length=128)
    is_published: bool = True
    sort_order: int = 0


class FaqUpdate(BaseModel):
    id: int = Field(..., ge=1, le=MAX_ID)
    question: Optional[str] = Field(default=None, min_length=1)
    answer: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, max_length=128)
    is_published: Optional[bool] = None
    sort_order: Optional[int] = None


FaqWrite = Union[FaqCreate, FaqUpdate]


class FaqUpsertRequest(BaseModel):
    """faq.upsert input: update when id is present, insert otherwise"""
    id: Optional[int] = Field(default=None, ge=1, le=MAX_ID)
    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)
    category: Optional[str] = Field(default=None, max_length=128)
    is_published: Optional[bool] = None
    sort_order: Optional[int] = None

    def to_write(self) -> FaqWrite:
        values = self.model_dump(exclude_unset=True, exclude={"id"})
        values = {k: v for k, v in values.items() if v is not None or k == "category"}
        if self.id is None:
            return FaqCreate(**values)
        return FaqUpdate(id=self.id, **values)


class FaqResponse(BaseModel):
    id: int
    question: str
    answer: str
    category: Optional[str] = None
    is_published: bool
    sort_order: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
