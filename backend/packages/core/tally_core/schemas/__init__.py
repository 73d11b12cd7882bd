"""
Pydantic schemas for API requests and responses.
"""

from .unread import CategoryUnreadStat, FeedUnreadStat, GlobalUnreadStat
from .user import UserResponse

__all__ = [
    # User
    "UserResponse",
    # Unread statistics
    "GlobalUnreadStat",
    "FeedUnreadStat",
    "CategoryUnreadStat",
]
