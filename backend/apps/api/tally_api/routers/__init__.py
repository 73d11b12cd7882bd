"""API routers."""

from . import feeds, unread

__all__ = ["feeds", "unread"]
