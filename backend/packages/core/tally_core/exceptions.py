"""
Unread statistics errors.

Every failure names the aggregate that was being computed and chains the
underlying cause.
"""

from enum import Enum


class Aggregate(str, Enum):
    """Unread aggregate granularity."""

    GLOBAL = "global"
    FEED = "feed"
    CATEGORY = "category"


class UnreadStatsError(Exception):
    """Base error for unread statistics computation."""

    def __init__(self, aggregate: Aggregate, detail: str):
        self.aggregate = aggregate
        self.detail = detail
        super().__init__(f"unable to fetch {aggregate.value} unread statistics: {detail}")


class StoreAccessFailure(UnreadStatsError):
    """The entry store could not be reached or the query could not execute."""


class RowDecodeFailure(UnreadStatsError):
    """A returned row could not be interpreted into the expected shape."""
