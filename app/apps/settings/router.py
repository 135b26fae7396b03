"""
Settings router
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from app.database import get_async_session
from app.apps.authentication.dependencies import require_admin
from app.apps.settings import crud
from app.apps.settings.schemas import SettingResponse, SettingUpsertRequest, SettingValueResponse
from app.common.errors import internal_error
from app.common.schemas import OkResponse

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=List[SettingResponse], status_code=status.HTTP_200_OK)
async def list_settings(session: AsyncSession = Depends(get_async_session)):
    try:
        return await crud.list_settings(session)
    except Exception as e:
        raise internal_error("listing settings", e)


@router.get("/{key}", response_model=SettingValueResponse, status_code=status.HTTP_200_OK)
async def get_setting(key: str, session: AsyncSession = Depends(get_async_session)):
    try:
        return SettingValueResponse(key=key, value=await crud.get_setting(session, key))
    except Exception as e:
        raise internal_error("getting setting", e)


@router.post("/upsert", response_model=SettingResponse, status_code=status.HTTP_200_OK)
async def upsert_setting(
    request: SettingUpsertRequest,
    session: AsyncSession = Depends(get_async_session),
):
    logger.info(f"Saving setting '{request.key}'")
    try:
        return await crud.upsert_setting(session, request.key, request.value)
    except Exception as e:
        await session.rollback()
        raise internal_error("saving setting", e)


@router.post("/upsert-many", response_model=OkResponse, status_code=status.HTTP_200_OK)
async def upsert_many_settings(
    request: List[SettingUpsertRequest],
    session: AsyncSession = Depends(get_async_session),
):
    """
    Apply key/value pairs one at a time, each committed on its own.
    Not atomic: when item k fails, items before it stay saved and the rest
    are not attempted.
    """
    logger.info(f"Saving {len(request)} settings")
    for index, item in enumerate(request):
        try:
            await crud.upsert_setting(session, item.key, item.value)
        except Exception as e:
            await session.rollback()
            logger.error(f"Batch settings save stopped at item {index} ('{item.key}')")
            raise internal_error("saving settings", e)
    return OkResponse(ok=True)
