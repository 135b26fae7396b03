"""
Admin user data access
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.apps.authentication.models import AdminRole, AdminUser


async def get_admin_by_email(session: AsyncSession, email: str) -> Optional[AdminUser]:
    result = await session.execute(select(AdminUser).where(AdminUser.email == email))
    return result.scalar_one_or_none()


async def get_admin_by_id(session: AsyncSession, admin_id: int) -> Optional[AdminUser]:
    return await session.get(AdminUser, admin_id)


async def create_admin(
    session: AsyncSession,
    email: str,
    password_hash: str,
    name: str,
    role: AdminRole = AdminRole.admin,
    is_active: bool = True,
) -> AdminUser:
    admin = AdminUser(
        email=email,
        password_hash=password_hash,
        name=name,
        role=role,
        is_active=is_active,
    )
    session.add(admin)
    await session.commit()
    await session.refresh(admin)
    return admin


async def update_last_signed_in(session: AsyncSession, admin_id: int) -> None:
    await session.execute(
        update(AdminUser).where(AdminUser.id == admin_id).values(last_signed_in=datetime.now())
    )
    await session.commit()


async def count_admins(session: AsyncSession) -> int:
    result = await session.execute(select(func.count()).select_from(AdminUser))
    return result.scalar_one()
