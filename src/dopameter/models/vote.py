"""Models capturing emoji votes on content."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from dopameter.db.session import Base
from dopameter.db.time import utcnow


class Vote(Base):
    """A single emoji reaction.

    The ledger is append-only and a voter may rate the same content any
    number of times, so there is no uniqueness constraint here.
    """

    __tablename__ = "vote"
    __table_args__ = (Index("ix_vote_content_id", "content_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("content.id", ondelete="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    emoji: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
