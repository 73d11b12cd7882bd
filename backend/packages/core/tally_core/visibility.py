"""
Visibility rule for unread aggregates.

An entry counts toward a user's visible unread set when it belongs to the
user, is unread, and neither its feed nor its feed's category is hidden
globally. The rule exists here in a Python form and a SQL form; every
aggregation is built from one of them.
"""

from typing import Any

from sqlalchemy import ColumnElement, Select, and_, select

from tally_database.models import Category, Entry, EntryStatus, Feed


def is_visible_unread(entry: Any, feed: Any, category: Any, user_id: int) -> bool:
    """
    Decide whether an entry counts toward the user's visible unread set.

    Args:
        entry: Object with ``user_id`` and ``status``.
        feed: The entry's feed, with ``hide_globally``.
        category: The feed's category, with ``hide_globally``.
        user_id: Target user.

    Returns:
        True if the entry is visible and unread.
    """
    return (
        entry.user_id == user_id
        and entry.status == EntryStatus.UNREAD.value
        and not feed.hide_globally
        and not category.hide_globally
    )


def visible_unread_clause(user_id: int) -> ColumnElement[bool]:
    """SQL form of :func:`is_visible_unread` over entries, feeds and categories."""
    return and_(
        Entry.user_id == user_id,
        Entry.status == EntryStatus.UNREAD.value,
        Feed.hide_globally.is_(False),
        Category.hide_globally.is_(False),
    )


def visible_unread_select(*columns: Any, user_id: int) -> Select:
    """
    Select columns from the visible unread entries of a user.

    Joins entries to their feed and category and applies the visibility rule.

    Args:
        columns: Columns or aggregate expressions to select.
        user_id: Target user.

    Returns:
        Select statement ready for aggregation or grouping.
    """
    return (
        select(*columns)
        .select_from(Entry)
        .join(Feed, Feed.id == Entry.feed_id)
        .join(Category, Category.id == Feed.category_id)
        .where(visible_unread_clause(user_id))
    )
