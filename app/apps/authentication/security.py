"""
Authentication utilities
Password hashing (bcrypt) and signed session tokens (JWT)
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

import bcrypt
import jwt
from fastapi import Response

from app.config import (
    BCRYPT_ROUNDS,
    JWT_ALGORITHM,
    JWT_SECRET,
    SESSION_COOKIE_NAME,
    SESSION_COOKIE_SECURE,
    SESSION_TTL_DAYS,
)

logger = logging.getLogger(__name__)

SESSION_MAX_AGE = SESSION_TTL_DAYS * 24 * 60 * 60  # seconds


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    The hash carries its own random salt and work factor and is safe to store.
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against a bcrypt hash (constant-time).

    Returns False for a malformed hash or a password bcrypt refuses.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError as e:
        logger.warning(f"Password verification failed: {e}")
        return False


def create_session_token(admin_id: int) -> str:
    """Issue a signed token bound to the admin id, valid for SESSION_TTL_DAYS"""
    now = datetime.now(timezone.utc)
    payload = {
        "id": admin_id,
        "iat": now,
        "exp": now + timedelta(days=SESSION_TTL_DAYS),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_session_token(token: str) -> Optional[int]:
    """
    Verify signature and expiry of a session token.

    Returns:
        The admin id carried by the token, or None when the token is
        expired, tampered with, malformed, or has no usable id.
    """
    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Session token expired")
        return None
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid session token: {e}")
        return None

    admin_id = payload.get("id")
    if not isinstance(admin_id, int) or isinstance(admin_id, bool):
        logger.warning("Session token carries no admin id")
        return None
    return admin_id


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=SESSION_COOKIE_SECURE,
        samesite="lax",
        max_age=SESSION_MAX_AGE,
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=SESSION_COOKIE_NAME,
        httponly=True,
        secure=SESSION_COOKIE_SECURE,
        samesite="lax",
    )
