"""
Media router
Media library records and the upload handler that produces them
"""
from fastapi import APIRouter, Depends, Path, HTTPException, status, UploadFile, File
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from app.database import get_async_session
from app.apps.authentication.dependencies import require_admin
from app.apps.media import crud
from app.apps.media.schemas import (
    MediaCreate,
    MediaDeleteResponse,
    MediaResponse,
    UploadedFileResponse,
)
from app.apps.media.storage import LocalMediaStorage, UploadRejected, get_media_storage
from app.common.fields import MAX_ID
from app.common.errors import internal_error

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=List[MediaResponse], status_code=status.HTTP_200_OK)
async def list_media(session: AsyncSession = Depends(get_async_session)):
    """
    All media files, newest first
    """
    try:
        return await crud.list_media(session)
    except Exception as e:
        raise internal_error("listing media", e)


@router.post("/file", response_model=UploadedFileResponse, status_code=status.HTTP_200_OK)
async def upload_file(
    file: UploadFile = File(...),
    storage: LocalMediaStorage = Depends(get_media_storage),
):
    """
    Store an image and return its metadata.
    The client then registers it in the library through /upload.
    """
    try:
        # One byte past the limit is enough for save() to reject it
        content = await file.read(storage.max_size + 1)
        return storage.save(content, file.filename or "", file.content_type or "")
    except UploadRejected as e:
        logger.warning(f"Upload rejected: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        raise internal_error("storing upload", e)


@router.post("/upload", response_model=MediaResponse, status_code=status.HTTP_200_OK)
async def register_upload(
    request: MediaCreate,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Persist the metadata of an accepted upload.
    Type and size were already checked by the upload handler.
    """
    try:
        media = await crud.insert_media(session, request)
        logger.info(f"Media {media.id} registered ({media.file_key})")
        return media
    except Exception as e:
        await session.rollback()
        raise internal_error("registering media", e)


@router.delete("/{media_id}", response_model=MediaDeleteResponse, status_code=status.HTTP_200_OK)
async def delete_media(
    media_id: int = Path(..., ge=1, le=MAX_ID),
    session: AsyncSession = Depends(get_async_session),
    storage: LocalMediaStorage = Depends(get_media_storage),
):
    """
    Two independent steps: remove the row, then remove the stored file.
    There is no transaction across them. When the second step fails the
    file is left orphaned and file_removed is False.
    """
    try:
        media = await crud.delete_media(session, media_id)
    except Exception as e:
        await session.rollback()
        raise internal_error("deleting media", e)

    if media is None:
        return MediaDeleteResponse(media=None, file_removed=False)

    file_removed = False
    try:
        file_removed = storage.delete(media.file_key)
    except (OSError, ValueError) as e:
        logger.error(f"Media {media_id} row removed but file {media.file_key} was not: {e}")

    return MediaDeleteResponse(media=MediaResponse.model_validate(media), file_removed=file_removed)
