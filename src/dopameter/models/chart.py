"""Memoized synthetic activity chart series."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from dopameter.db.session import Base
from dopameter.db.time import utcnow


class ChartData(Base):
    """One generated series set per time frame (24H, 7D, 30D)."""

    __tablename__ = "chart_data"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    time_frame: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    labels: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    core_dopamine: Mapped[list[int]] = mapped_column(JSON, nullable=False)
    liquidation_moments: Mapped[list[int]] = mapped_column(JSON, nullable=False)
    chill_potent: Mapped[list[int]] = mapped_column(JSON, nullable=False)
    fun_fast_hits: Mapped[list[int]] = mapped_column(JSON, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
