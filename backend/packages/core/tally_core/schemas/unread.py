"""
Unread statistics schemas.

Result models for the global, per-feed and per-category unread aggregates.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive timestamps returned by backends without timezone support."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class GlobalUnreadStat(BaseModel):
    """
    Unread statistics for a user's whole reading list.

    ``newest`` is None when nothing is unread; it is never a placeholder date.
    """

    model_config = ConfigDict(from_attributes=True, frozen=True)

    count: int = Field(ge=0)
    newest: datetime | None = None

    @field_validator("newest")
    @classmethod
    def normalize_newest(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)

    @model_validator(mode="after")
    def check_newest_matches_count(self) -> "GlobalUnreadStat":
        if self.count == 0 and self.newest is not None:
            raise ValueError("newest must be empty when count is 0")
        if self.count > 0 and self.newest is None:
            raise ValueError("newest is required when count is positive")
        return self

    @property
    def has_unread(self) -> bool:
        """Whether the user has any visible unread entry."""
        return self.count > 0


class FeedUnreadStat(BaseModel):
    """Unread statistics for a feed with at least one visible unread entry."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    feed_id: int
    count: int = Field(ge=1)
    newest: datetime

    @field_validator("newest")
    @classmethod
    def normalize_newest(cls, value: datetime) -> datetime:
        return as_utc(value)


class CategoryUnreadStat(BaseModel):
    """Unread statistics for a category with at least one visible unread entry."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    category_id: int
    title: str
    count: int = Field(ge=1)
    newest: datetime

    @field_validator("newest")
    @classmethod
    def normalize_newest(cls, value: datetime) -> datetime:
        return as_utc(value)
