"""
In-memory entry store.

Aggregates over the category, feed and entry values copied at construction,
so later changes to the source objects do not affect results. Grouping
accumulates per key and only emits keys that received a visible entry,
which matches what GROUP BY produces in the database store.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from datetime import datetime
from typing import Any, NamedTuple

from tally_core.visibility import is_visible_unread


class _CategoryRow(NamedTuple):
    id: int
    title: str
    hide_globally: bool


class _FeedRow(NamedTuple):
    id: int
    category_id: int
    hide_globally: bool


class _EntryRow(NamedTuple):
    user_id: int
    feed_id: int
    status: str
    published_at: datetime


class _Accumulator:
    """Running count and newest timestamp for one group."""

    __slots__ = ("count", "newest")

    def __init__(self) -> None:
        self.count = 0
        self.newest: datetime | None = None

    def add(self, published_at: datetime) -> None:
        self.count += 1
        if self.newest is None or published_at > self.newest:
            self.newest = published_at


class SnapshotUnreadStatsStore:
    """
    Unread statistics store over an in-memory snapshot.

    Accepts any objects exposing the model attributes (ORM instances,
    dataclasses, namespaces). Entries whose feed or category is not part of
    the snapshot are ignored, as an inner join would.
    """

    def __init__(self, categories: Iterable[Any], feeds: Iterable[Any], entries: Iterable[Any]):
        """
        Initialize the store.

        Args:
            categories: Categories with ``id``, ``title`` and ``hide_globally``.
            feeds: Feeds with ``id``, ``category_id`` and ``hide_globally``.
            entries: Entries with ``user_id``, ``feed_id``, ``status`` and ``published_at``.
        """
        self._categories = {
            c.id: _CategoryRow(c.id, c.title, bool(c.hide_globally)) for c in categories
        }
        self._feeds = {f.id: _FeedRow(f.id, f.category_id, bool(f.hide_globally)) for f in feeds}
        self._entries = tuple(
            _EntryRow(e.user_id, e.feed_id, e.status, e.published_at) for e in entries
        )

    def _visible(self, user_id: int) -> Iterator[tuple[_EntryRow, _FeedRow, _CategoryRow]]:
        for entry in self._entries:
            feed = self._feeds.get(entry.feed_id)
            if feed is None:
                continue
            category = self._categories.get(feed.category_id)
            if category is None:
                continue
            if is_visible_unread(entry, feed, category, user_id):
                yield entry, feed, category

    async def fetch_global(self, user_id: int) -> Mapping[str, Any]:
        total = _Accumulator()
        for entry, _feed, _category in self._visible(user_id):
            total.add(entry.published_at)
        return {"count": total.count, "newest": total.newest}

    async def fetch_feed_groups(self, user_id: int) -> Sequence[Mapping[str, Any]]:
        groups: dict[int, _Accumulator] = {}
        for entry, feed, _category in self._visible(user_id):
            groups.setdefault(feed.id, _Accumulator()).add(entry.published_at)

        return [
            {"feed_id": feed_id, "count": acc.count, "newest": acc.newest}
            for feed_id, acc in groups.items()
        ]

    async def fetch_category_groups(self, user_id: int) -> Sequence[Mapping[str, Any]]:
        groups: dict[tuple[int, str], _Accumulator] = {}
        for entry, _feed, category in self._visible(user_id):
            key = (category.id, category.title)
            groups.setdefault(key, _Accumulator()).add(entry.published_at)

        return [
            {"category_id": category_id, "title": title, "count": acc.count, "newest": acc.newest}
            for (category_id, title), acc in groups.items()
        ]
