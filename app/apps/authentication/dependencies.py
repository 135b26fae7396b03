"""
Authentication dependencies for FastAPI
Session gate applied to every protected procedure
"""
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.database import get_async_session
from app.apps.authentication.crud import get_admin_by_id
from app.apps.authentication.models import AdminUser
from app.apps.authentication.security import decode_session_token
from app.config import SESSION_COOKIE_NAME

logger = logging.getLogger(__name__)

# Security scheme for Swagger UI
security = HTTPBearer(auto_error=False)


def extract_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Session cookie first, bearer header as fallback"""
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if token:
        return token
    if credentials and credentials.credentials:
        return credentials.credentials
    return None


async def resolve_admin(session: AsyncSession, token: Optional[str]) -> Optional[AdminUser]:
    """
    Load the admin a token belongs to.

    Returns None for a missing, invalid or expired token and for an admin
    that no longer exists or has been deactivated.
    """
    if not token:
        return None

    admin_id = decode_session_token(token)
    if admin_id is None:
        return None

    admin = await get_admin_by_id(session, admin_id)
    if admin is None:
        logger.warning(f"Session token refers to unknown admin {admin_id}")
        return None
    if not admin.is_active:
        logger.warning(f"Session token refers to inactive admin {admin_id}")
        return None
    return admin


async def get_current_admin_optional(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    session: AsyncSession = Depends(get_async_session),
) -> Optional[AdminUser]:
    """
    Optional authentication dependency - returns None if not authenticated.
    Never raises.
    """
    return await resolve_admin(session, extract_token(request, credentials))


async def require_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    session: AsyncSession = Depends(get_async_session),
) -> AdminUser:
    """
    Dependency to get the current authenticated admin.
    Rejects with 401 whenever no active admin can be resolved from the request.
    """
    token = extract_token(request, credentials)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )

    admin = await resolve_admin(session, token)
    if admin is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="The provided token is invalid or expired",
        )

    request.state.admin = admin
    return admin
