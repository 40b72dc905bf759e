"""Per-user saved content."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from dopameter.db.session import Base
from dopameter.db.time import utcnow


class Favorite(Base):
    """Saved content entry, at most one per (user, content) pair."""

    __tablename__ = "favorite"
    __table_args__ = (
        UniqueConstraint("user_id", "content_id", name="uq_favorite_user_content"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    content_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("content.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
