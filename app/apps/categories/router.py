"""
Categories router
"""
from fastapi import APIRouter, Depends, Path, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from app.database import get_async_session
from app.apps.authentication.dependencies import require_admin
from app.apps.categories import crud
from app.apps.categories.schemas import CategoryResponse, CategoryUpsertRequest
from app.common.fields import MAX_ID
from app.common.errors import conflict_error, internal_error, not_found_error
from app.common.schemas import DeleteResponse

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=List[CategoryResponse], status_code=status.HTTP_200_OK)
async def list_categories(session: AsyncSession = Depends(get_async_session)):
    try:
        return await crud.list_categories(session)
    except Exception as e:
        raise internal_error("listing categories", e)


@router.post("/upsert", response_model=CategoryResponse, status_code=status.HTTP_200_OK)
async def upsert_category(
    request: CategoryUpsertRequest,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Create a category (no id) or update one (id).
    A duplicate slug without id is a conflict, never a silent update.
    """
    logger.info(f"Upserting category '{request.slug}'")
    try:
        category = await crud.upsert_category(session, request.to_write())
        if category is None:
            raise not_found_error("Category", request.id)
        return category

    except HTTPException:
        raise
    except IntegrityError as e:
        await session.rollback()
        raise conflict_error("Category with this slug", e)
    except Exception as e:
        await session.rollback()
        raise internal_error("upserting category", e)


@router.delete("/{category_id}", response_model=DeleteResponse, status_code=status.HTTP_200_OK)
async def delete_category(
    category_id: int = Path(..., ge=1, le=MAX_ID),
    session: AsyncSession = Depends(get_async_session),
):
    try:
        deleted = await crud.delete_category(session, category_id)
        return DeleteResponse(deleted=deleted)
    except Exception as e:
        await session.rollback()
        raise internal_error("deleting category", e)
