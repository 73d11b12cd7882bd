"""
Unread statistics router.

Provides badge counts and newest-unread timestamps at global, feed and
category granularity.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from tally_core import get_logger
from tally_core.exceptions import UnreadStatsError
from tally_core.schemas import (
    CategoryUnreadStat,
    FeedUnreadStat,
    GlobalUnreadStat,
    UserResponse,
)
from tally_core.services import UnreadStatsService

from ..dependencies import get_current_user, get_unread_stats_service

logger = get_logger(__name__)

router = APIRouter()


def _stats_unavailable(error: UnreadStatsError, user_id: int) -> HTTPException:
    logger.exception(
        "Unread statistics failed",
        extra={"aggregate": error.aggregate.value, "user_id": user_id},
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Unable to compute unread statistics",
    )


@router.get("")
async def get_global_unread_stat(
    current_user: Annotated[UserResponse, Depends(get_current_user)],
    stats_service: Annotated[UnreadStatsService, Depends(get_unread_stats_service)],
) -> GlobalUnreadStat:
    """
    Get unread count and newest unread timestamp for the reading list.

    Args:
        current_user: Current authenticated user.
        stats_service: Unread statistics service.

    Returns:
        Global unread statistics; newest is null when nothing is unread.
    """
    try:
        return await stats_service.compute_global_unread_stat(current_user.id)
    except UnreadStatsError as e:
        raise _stats_unavailable(e, current_user.id) from None


@router.get("/feeds")
async def list_feed_unread_stats(
    current_user: Annotated[UserResponse, Depends(get_current_user)],
    stats_service: Annotated[UnreadStatsService, Depends(get_unread_stats_service)],
) -> list[FeedUnreadStat]:
    """
    Get unread statistics per feed.

    Args:
        current_user: Current authenticated user.
        stats_service: Unread statistics service.

    Returns:
        Stats for feeds with unread entries only.
    """
    try:
        return await stats_service.compute_feed_unread_stats(current_user.id)
    except UnreadStatsError as e:
        raise _stats_unavailable(e, current_user.id) from None


@router.get("/categories")
async def list_category_unread_stats(
    current_user: Annotated[UserResponse, Depends(get_current_user)],
    stats_service: Annotated[UnreadStatsService, Depends(get_unread_stats_service)],
) -> list[CategoryUnreadStat]:
    """
    Get unread statistics per category.

    Args:
        current_user: Current authenticated user.
        stats_service: Unread statistics service.

    Returns:
        Stats for categories with unread entries only.
    """
    try:
        return await stats_service.compute_category_unread_stats(current_user.id)
    except UnreadStatsError as e:
        raise _stats_unavailable(e, current_user.id) from None
