"""Entry store interface consumed by the unread statistics service."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol


class UnreadStatsStore(Protocol):
    """
    Read-only access to a user's visible unread entries.

    Each method is one logical read against a consistent snapshot. Failures
    to reach the backend are raised as ``StoreAccessFailure``; an empty
    result is not a failure.
    """

    async def fetch_global(self, user_id: int) -> Mapping[str, Any]:
        """Return one row with ``count`` and ``newest``."""
        ...

    async def fetch_feed_groups(self, user_id: int) -> Sequence[Mapping[str, Any]]:
        """Return one row per feed with ``feed_id``, ``count`` and ``newest``."""
        ...

    async def fetch_category_groups(self, user_id: int) -> Sequence[Mapping[str, Any]]:
        """Return one row per category with ``category_id``, ``title``, ``count`` and ``newest``."""
        ...
