"""
Unread statistics service.

Computes the global, per-feed and per-category unread aggregates of a user.
Every operation is a single read against the store; nothing is cached and
failures are never retried.
"""

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from tally_core.exceptions import Aggregate, RowDecodeFailure
from tally_core.schemas import CategoryUnreadStat, FeedUnreadStat, GlobalUnreadStat
from tally_core.stores import SQLAlchemyUnreadStatsStore, UnreadStatsStore

StatT = TypeVar("StatT", bound=BaseModel)


def _decode(schema: type[StatT], row: Mapping[str, Any], aggregate: Aggregate) -> StatT:
    try:
        return schema.model_validate(row)
    except ValidationError as e:
        raise RowDecodeFailure(aggregate, f"malformed row: {e}") from e


def _decode_all(
    schema: type[StatT], rows: Sequence[Mapping[str, Any]], aggregate: Aggregate
) -> list[StatT]:
    # One bad row fails the whole aggregate
    return [_decode(schema, row, aggregate) for row in rows]


class UnreadStatsService:
    """Unread statistics aggregation service."""

    def __init__(self, store: UnreadStatsStore):
        """
        Initialize unread statistics service.

        Args:
            store: Entry store to read from.
        """
        self.store = store

    @classmethod
    def from_session(cls, session: AsyncSession) -> "UnreadStatsService":
        """Build a service reading from the relational database."""
        return cls(SQLAlchemyUnreadStatsStore(session))

    async def compute_global_unread_stat(self, user_id: int) -> GlobalUnreadStat:
        """
        Count the user's visible unread entries.

        Args:
            user_id: User identifier.

        Returns:
            Count and newest publication time; newest is None when count is 0.

        Raises:
            StoreAccessFailure: If the store could not be read.
            RowDecodeFailure: If the returned row is malformed.
        """
        row = await self.store.fetch_global(user_id)
        return _decode(GlobalUnreadStat, row, Aggregate.GLOBAL)

    async def compute_feed_unread_stats(self, user_id: int) -> list[FeedUnreadStat]:
        """
        Count the user's visible unread entries per feed.

        Feeds without visible unread entries are absent from the result.
        Order is not guaranteed.

        Args:
            user_id: User identifier.

        Returns:
            One stat per feed with at least one visible unread entry.

        Raises:
            StoreAccessFailure: If the store could not be read.
            RowDecodeFailure: If any returned row is malformed.
        """
        rows = await self.store.fetch_feed_groups(user_id)
        return _decode_all(FeedUnreadStat, rows, Aggregate.FEED)

    async def compute_category_unread_stats(self, user_id: int) -> list[CategoryUnreadStat]:
        """
        Count the user's visible unread entries per category.

        Categories without visible unread entries are absent from the result.
        The title is the one read during this call. Order is not guaranteed.

        Args:
            user_id: User identifier.

        Returns:
            One stat per category with at least one visible unread entry.

        Raises:
            StoreAccessFailure: If the store could not be read.
            RowDecodeFailure: If any returned row is malformed.
        """
        rows = await self.store.fetch_category_groups(user_id)
        return _decode_all(CategoryUnreadStat, rows, Aggregate.CATEGORY)
