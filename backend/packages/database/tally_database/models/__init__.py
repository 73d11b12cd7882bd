"""
Database models package.

This module exports all SQLAlchemy models for the Tally application.
"""

from .base import Base, TimestampMixin
from .category import Category
from .entry import Entry, EntryStatus
from .feed import Feed
from .user import User

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "Category",
    "Feed",
    "Entry",
    "EntryStatus",
]
