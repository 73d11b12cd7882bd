"""
Feed model definition.

This module defines the Feed model for a user's subscribed feeds.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class Feed(Base, TimestampMixin):
    """
    Subscribed feed model.

    Feeds belong to exactly one category of their owner.

    Attributes:
        id: Feed identifier.
        user_id: Owning user.
        category_id: Category the feed is filed under.
        title: Feed title.
        feed_url: Feed URL, unique per user.
        site_url: Website URL associated with feed.
        hide_globally: Exclude this feed's entries from global unread views.
    """

    __tablename__ = "feeds"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True
    )

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    feed_url: Mapped[str] = mapped_column(String(2000), nullable=False)
    site_url: Mapped[str | None] = mapped_column(String(2000))

    hide_globally: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default=false(), nullable=False
    )

    # Relationships
    category = relationship("Category", back_populates="feeds")
    entries = relationship("Entry", back_populates="feed", cascade="all, delete-orphan")

    __table_args__ = (UniqueConstraint("user_id", "feed_url", name="uq_feeds_user_feed_url"),)
