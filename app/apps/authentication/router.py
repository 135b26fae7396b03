"""
Authentication router
Login, logout, current session and first-admin setup
"""
from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from app.database import get_async_session
from app.apps.authentication import crud
from app.apps.authentication.models import AdminRole, AdminUser
from app.apps.authentication.schemas import (
    AdminProfile,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    SetupRequest,
    SetupResponse,
)
from app.apps.authentication.dependencies import get_current_admin_optional
from app.apps.authentication.security import (
    SESSION_MAX_AGE,
    clear_session_cookie,
    create_session_token,
    hash_password,
    set_session_cookie,
    verify_password,
)
from app.common.errors import conflict_error, internal_error

logger = logging.getLogger(__name__)

router = APIRouter()

# Same message for unknown email and wrong password
INVALID_CREDENTIALS = "Invalid credentials"


@router.post("/login", response_model=LoginResponse, status_code=status.HTTP_200_OK)
async def login(
    request: LoginRequest,
    response: Response,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Verify credentials and open a session.
    The signed token is set as an HTTP-only cookie and returned for bearer use.
    """
    logger.info("Attempting to log in admin")

    try:
        admin = await crud.get_admin_by_email(session, request.email)

        if admin is None or not admin.password_hash:
            logger.warning("Login failed: unknown account or account without password")
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

        if not verify_password(request.password, admin.password_hash):
            logger.warning(f"Login failed: wrong password for admin {admin.id}")
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

        if not admin.is_active:
            logger.warning(f"Login refused: admin {admin.id} is inactive")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Account is inactive")

        await crud.update_last_signed_in(session, admin.id)
        token = create_session_token(admin.id)
        set_session_cookie(response, token)

        logger.info(f"Admin {admin.id} logged in successfully")
        return LoginResponse(
            id=admin.id,
            name=admin.name,
            email=admin.email,
            role=admin.role,
            access_token=token,
            expires_in=SESSION_MAX_AGE,
        )

    except HTTPException:
        raise
    except Exception as e:
        await session.rollback()
        raise internal_error("during login", e)


@router.post("/logout", response_model=LogoutResponse, status_code=status.HTTP_200_OK)
async def logout(response: Response):
    """
    Clear the session cookie. Always succeeds.
    """
    clear_session_cookie(response)
    logger.info("Session cookie cleared")
    return LogoutResponse(ok=True)


@router.get("/me", response_model=Optional[AdminProfile], status_code=status.HTTP_200_OK)
async def me(admin: Optional[AdminUser] = Depends(get_current_admin_optional)):
    """
    Public profile of the signed-in admin, or null when there is no valid session.
    """
    if admin is None:
        return None
    return AdminProfile.model_validate(admin)


@router.post("/setup", response_model=SetupResponse, status_code=status.HTTP_201_CREATED)
async def setup(
    request: SetupRequest,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Create the first admin. Only reachable while no admin exists.
    """
    logger.info("Attempting first admin setup")

    try:
        existing = await crud.count_admins(session)
        if existing > 0:
            logger.warning("Setup refused: an admin already exists")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin already exists")

        admin = await crud.create_admin(
            session,
            email=request.email,
            password_hash=hash_password(request.password),
            name=request.name,
            role=AdminRole.admin,
            is_active=True,
        )

        logger.info(f"First admin created, ID: {admin.id}")
        return SetupResponse(id=admin.id, name=admin.name, email=admin.email)

    except HTTPException:
        raise
    except IntegrityError as e:
        await session.rollback()
        raise conflict_error("Admin", e)
    except Exception as e:
        await session.rollback()
        raise internal_error("during setup", e)
