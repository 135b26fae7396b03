"""
Response schemas shared by every resource router
"""
from pydantic import BaseModel


class DeleteResponse(BaseModel):
    """Delete is idempotent: deleted is False when the row was already gone"""
    success: bool = True
    deleted: bool


class OkResponse(BaseModel):
    ok: bool = True
