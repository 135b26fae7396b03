"""
Mapping of store failures to client-facing errors
"""
from fastapi import HTTPException, status
import logging

logger = logging.getLogger(__name__)


def conflict_error(entity: str, error: Exception) -> HTTPException:
    """
    Unique-constraint violation on write (duplicate slug, email or key).
    The driver message is logged, never returned.
    """
    logger.warning(f"{entity} write rejected by unique constraint: {error}")
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=f"{entity} already exists",
    )


def internal_error(action: str, error: Exception) -> HTTPException:
    """Connection loss, timeout or any other unexpected store failure"""
    logger.error(f"Error {action}: {str(error)}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


def not_found_error(entity: str, entity_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity} not found: {entity_id}",
    )
