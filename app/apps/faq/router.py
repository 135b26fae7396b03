"""
FAQ router
"""
from fastapi import APIRouter, Depends, Path, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from app.database import get_async_session
from app.apps.authentication.dependencies import require_admin
from app.apps.faq import crud
from app.apps.faq.schemas import FaqResponse, FaqUpsertRequest
from app.common.fields import MAX_ID
from app.common.errors import internal_error, not_found_error
from app.common.schemas import DeleteResponse

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=List[FaqResponse], status_code=status.HTTP_200_OK)
async def list_faq(session: AsyncSession = Depends(get_async_session)):
    try:
        return await crud.list_faq(session)
    except Exception as e:
        raise internal_error("listing FAQ items", e)


@router.post("/upsert", response_model=FaqResponse, status_code=status.HTTP_200_OK)
async def upsert_faq(
    request: FaqUpsertRequest,
    session: AsyncSession = Depends(get_async_session),
):
    try:
        item = await crud.upsert_faq(session, request.to_write())
        if item is None:
            raise not_found_error("FAQ item", request.id)
        logger.info(f"FAQ item {item.id} saved")
        return item

    except HTTPException:
        raise
    except Exception as e:
        await session.rollback()
        raise internal_error("upserting FAQ item", e)


@router.delete("/{faq_id}", response_model=DeleteResponse, status_code=status.HTTP_200_OK)
async def delete_faq(
    faq_id: int = Path(..., ge=1, le=MAX_ID),
    session: AsyncSession = Depends(get_async_session),
):
    try:
        deleted = await crud.delete_faq(session, faq_id)
        return DeleteResponse(deleted=deleted)
    except Exception as e:
        await session.rollback()
        raise internal_error("deleting FAQ item", e)
