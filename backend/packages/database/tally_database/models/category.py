"""
Category model definition.

Categories group a user's feeds and can be hidden from global views.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String, UniqueConstraint, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class Category(Base, TimestampMixin):
    """
    Feed category (label).

    Attributes:
        id: Category identifier.
        user_id: Owning user.
        title: Display title, unique per user.
        hide_globally: Exclude every feed of this category from global
            unread views, independent of entry status.
    """

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    hide_globally: Mapped[bool] = mapped_column(
        Boolean, default=False, server_default=false(), nullable=False
    )

    user = relationship("User", back_populates="categories")
    feeds = relationship("Feed", back_populates="category", cascade="all, delete-orphan")

    __table_args__ = (UniqueConstraint("user_id", "title", name="uq_categories_user_title"),)
