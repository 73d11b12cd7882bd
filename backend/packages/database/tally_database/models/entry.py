"""
Entry model definition.

This module defines the Entry model for feed articles.
"""

from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class EntryStatus(str, Enum):
    """Entry reading status enumeration."""

    UNREAD = "unread"
    READ = "read"
    REMOVED = "removed"


class Entry(Base, TimestampMixin):
    """
    Feed entry model.

    Entries are created by ingestion and only change status afterwards.

    Attributes:
        id: Entry identifier.
        user_id: Owning user.
        feed_id: Feed the entry was fetched from.
        title: Entry title.
        url: Link to the original article.
        content: Entry body.
        status: Reading status (unread, read or removed).
        published_at: Publication timestamp reported by the feed.
    """

    __tablename__ = "entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    feed_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("feeds.id", ondelete="CASCADE"), nullable=False, index=True
    )

    title: Mapped[str] = mapped_column(String(1000), nullable=False)
    url: Mapped[str | None] = mapped_column(String(2000))
    content: Mapped[str | None] = mapped_column(Text)

    status: Mapped[str] = mapped_column(
        String(20), default=EntryStatus.UNREAD.value, nullable=False
    )
    published_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    feed = relationship("Feed", back_populates="entries")

    __table_args__ = (Index("ix_entries_user_status", "user_id", "status"),)
