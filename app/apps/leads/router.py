"""
Leads router
"""
from fastapi import APIRouter, Depends, Path, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
import logging

from app.database import get_async_session
from app.apps.authentication.dependencies import require_admin
from app.apps.leads import crud
from app.apps.leads.schemas import LeadResponse, LeadStatusUpdate
from app.common.fields import MAX_ID
from app.common.errors import internal_error, not_found_error
from app.common.schemas import DeleteResponse

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=List[LeadResponse], status_code=status.HTTP_200_OK)
async def list_leads(session: AsyncSession = Depends(get_async_session)):
    """
    All leads, newest first
    """
    try:
        return await crud.list_leads(session)
    except Exception as e:
        raise internal_error("listing leads", e)


@router.get("/{lead_id}", response_model=Optional[LeadResponse], status_code=status.HTTP_200_OK)
async def get_lead_by_id(
    lead_id: int = Path(..., ge=1, le=MAX_ID),
    session: AsyncSession = Depends(get_async_session),
):
    try:
        return await crud.get_lead_by_id(session, lead_id)
    except Exception as e:
        raise internal_error("getting lead", e)


@router.post("/update-status", response_model=LeadResponse, status_code=status.HTTP_200_OK)
async def update_lead_status(
    request: LeadStatusUpdate,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Move a lead to another status
    """
    logger.info(f"Setting lead {request.id} status to {request.status.value}")
    try:
        lead = await crud.update_lead_status(session, request.id, request.status)
        if lead is None:
            raise not_found_error("Lead", request.id)
        return lead

    except HTTPException:
        raise
    except Exception as e:
        await session.rollback()
        raise internal_error("updating lead status", e)


@router.delete("/{lead_id}", response_model=DeleteResponse, status_code=status.HTTP_200_OK)
async def delete_lead(
    lead_id: int = Path(..., ge=1, le=MAX_ID),
    session: AsyncSession = Depends(get_async_session),
):
    try:
        deleted = await crud.delete_lead(session, lead_id)
        return DeleteResponse(deleted=deleted)
    except Exception as e:
        await session.rollback()
        raise internal_error("deleting lead", e)
