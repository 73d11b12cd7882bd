"""
Feeds router.

Provides feed maintenance endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from tally_core import get_logger
from tally_core.schemas import UserResponse
from tally_core.services import FeedService

from ..dependencies import get_current_user, get_feed_service

logger = get_logger(__name__)

router = APIRouter()


@router.delete("/{feed_id}/entries", status_code=status.HTTP_204_NO_CONTENT)
async def clear_feed_entries(
    feed_id: int,
    current_user: Annotated[UserResponse, Depends(get_current_user)],
    feed_service: Annotated[FeedService, Depends(get_feed_service)],
) -> Response:
    """
    Remove every entry of a feed.

    Args:
        feed_id: Feed identifier.
        current_user: Current authenticated user.
        feed_service: Feed service.

    Returns:
        Empty response.

    Raises:
        HTTPException: If feed not found or unauthorized.
    """
    try:
        removed = await feed_service.clear_feed_entries(current_user.id, feed_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from None

    logger.info("Feed entries cleared", extra={"feed_id": feed_id, "removed": removed})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
