"""
Feed maintenance service.

Handles ownership checks and bulk entry removal for a user's feeds.
"""

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from tally_database.models import Entry, Feed


class FeedService:
    """Feed maintenance service."""

    def __init__(self, session: AsyncSession):
        """
        Initialize feed service.

        Args:
            session: Database session.
        """
        self.session = session

    async def feed_exists(self, user_id: int, feed_id: int) -> bool:
        """
        Check that a feed exists and belongs to the user.

        Args:
            user_id: User identifier.
            feed_id: Feed identifier.

        Returns:
            True if the user owns the feed.
        """
        stmt = select(exists().where(Feed.id == feed_id, Feed.user_id == user_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def remove_feed_entries(self, user_id: int, feed_id: int) -> int:
        """
        Delete every entry of a feed for the user.

        Args:
            user_id: User identifier.
            feed_id: Feed identifier.

        Returns:
            Number of deleted entries.
        """
        stmt = delete(Entry).where(Entry.user_id == user_id, Entry.feed_id == feed_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount or 0

    async def clear_feed_entries(self, user_id: int, feed_id: int) -> int:
        """
        Remove all entries of a feed after checking ownership.

        Args:
            user_id: User identifier.
            feed_id: Feed identifier.

        Returns:
            Number of deleted entries.

        Raises:
            ValueError: If feed not found or unauthorized.
        """
        if not await self.feed_exists(user_id, feed_id):
            raise ValueError("Feed not found")

        return await self.remove_feed_entries(user_id, feed_id)
