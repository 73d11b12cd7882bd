"""
Service layer.

Business logic services for the application.
"""

from .feed_service import FeedService
from .unread_stats_service import UnreadStatsService

__all__ = [
    "FeedService",
    "UnreadStatsService",
]
