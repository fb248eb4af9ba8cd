"""Bookmark model."""
from sqlalchemy import CheckConstraint, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base

RATING_MIN = 1
RATING_MAX = 5


class Bookmark(Base):
    """Bookmark model - a named URL with an optional description and a 1-5 rating."""

    __tablename__ = "bookmarks"
    __table_args__ = (
        CheckConstraint(
            f"rating BETWEEN {RATING_MIN} AND {RATING_MAX}",
            name="ck_bookmarks_rating_range",
        ),
        CheckConstraint("length(name) > 0", name="ck_bookmarks_name_not_empty"),
        CheckConstraint("length(url) > 0", name="ck_bookmarks_url_not_empty"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
