"""
Lead data access
"""
from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.apps.leads.models import Lead, LeadStatus
from app.apps.leads.schemas import LeadCreate


async def list_leads(session: AsyncSession) -> List[Lead]:
    """Newest first"""
    result = await session.execute(select(Lead).order_by(Lead.created_at.desc(), Lead.id.desc()))
    return list(result.scalars().all())


async def get_lead_by_id(session: AsyncSession, lead_id: int) -> Optional[Lead]:
    return await session.get(Lead, lead_id)


async def create_lead(session: AsyncSession, data: LeadCreate) -> Lead:
    lead = Lead(**data.model_dump())
    session.add(lead)
    await session.commit()
    await session.refresh(lead)
    return lead


async def update_lead_status(session: AsyncSession, lead_id: int, status: LeadStatus) -> Optional[Lead]:
    lead = await session.get(Lead, lead_id)
    if lead is None:
        return None

    lead.status = status
    lead.updated_at = datetime.now()
    await session.commit()
    await session.refresh(lead)
    return lead


async def delete_lead(session: AsyncSession, lead_id: int) -> bool:
    result = await session.execute(delete(Lead).where(Lead.id == lead_id))
    await session.commit()
    return result.rowcount > 0


async def count_leads(session: AsyncSession, status: Optional[LeadStatus] = None) -> int:
    stmt = select(func.count()).select_from(Lead)
    if status is not None:
        stmt = stmt.where(Lead.status == status)
    result = await session.execute(stmt)
    return result.scalar_one()
