"""
Entry stores for unread statistics.

A store performs the filtered read behind each aggregate and hands back raw
rows; the service decodes them.
"""

from .base import UnreadStatsStore
from .snapshot import SnapshotUnreadStatsStore
from .sql import SQLAlchemyUnreadStatsStore

__all__ = [
    "UnreadStatsStore",
    "SQLAlchemyUnreadStatsStore",
    "SnapshotUnreadStatsStore",
]
