"""
SQLAlchemy entry store.

Each aggregate is a single SELECT over entries joined to feeds and
categories, so count, newest and grouping come from one snapshot.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import Select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tally_core.exceptions import Aggregate, RowDecodeFailure, StoreAccessFailure
from tally_core.visibility import visible_unread_select
from tally_database.models import Category, Entry


class SQLAlchemyUnreadStatsStore:
    """Unread statistics store backed by the relational database."""

    def __init__(self, session: AsyncSession):
        """
        Initialize the store.

        Args:
            session: Database session.
        """
        self.session = session

    async def fetch_global(self, user_id: int) -> Mapping[str, Any]:
        stmt = visible_unread_select(
            func.count().label("count"),
            func.max(Entry.published_at).label("newest"),
            user_id=user_id,
        )
        rows = await self._fetch(stmt, Aggregate.GLOBAL)
        if len(rows) != 1:
            raise RowDecodeFailure(
                Aggregate.GLOBAL, f"expected a single aggregate row, got {len(rows)}"
            )
        return rows[0]

    async def fetch_feed_groups(self, user_id: int) -> Sequence[Mapping[str, Any]]:
        stmt = visible_unread_select(
            Entry.feed_id.label("feed_id"),
            func.count().label("count"),
            func.max(Entry.published_at).label("newest"),
            user_id=user_id,
        ).group_by(Entry.feed_id)
        return await self._fetch(stmt, Aggregate.FEED)

    async def fetch_category_groups(self, user_id: int) -> Sequence[Mapping[str, Any]]:
        stmt = visible_unread_select(
            Category.id.label("category_id"),
            Category.title.label("title"),
            func.count().label("count"),
            func.max(Entry.published_at).label("newest"),
            user_id=user_id,
        ).group_by(Category.id, Category.title)
        return await self._fetch(stmt, Aggregate.CATEGORY)

    async def _fetch(self, stmt: Select, aggregate: Aggregate) -> list[Mapping[str, Any]]:
        try:
            result = await self.session.execute(stmt)
            return [dict(row) for row in result.mappings().all()]
        except SQLAlchemyError as e:
            raise StoreAccessFailure(aggregate, str(e)) from e
        except (ValueError, TypeError) as e:
            # Result processors reject values they cannot convert
            raise RowDecodeFailure(aggregate, f"malformed row: {e}") from e
