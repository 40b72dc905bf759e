"""SQLAlchemy-backed storage."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from sqlalchemy import delete, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from dopameter.db.session import build_engine, create_tables
from dopameter.db.time import utcnow
from dopameter.models import ChartData, Content, Favorite, Vote
from dopameter.schemas import (
    ChartSeries,
    ChartTimeFrame,
    ContentOut,
    ContentType,
    Emoji,
    FavoriteOut,
    VoteOut,
)

from .base import Storage

__all__ = ["SqlStorage"]

logger = logging.getLogger(__name__)

# Range of the INTEGER primary key columns (int4 on PostgreSQL).
_MIN_ID = -(2**31)
_MAX_ID = 2**31 - 1


def _storable_id(value: int) -> bool:
    return _MIN_ID <= value <= _MAX_ID


class SqlStorage(Storage):
    """Storage that persists records through the ORM models.

    Every operation runs in its own session and commits before returning.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._sessionmaker = sessionmaker(
            bind=engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

    @classmethod
    def from_url(cls, url: str, *, echo: bool = False, create: bool = True) -> SqlStorage:
        """Build storage for ``url``, creating missing tables unless told not to."""
        engine = build_engine(url, echo=echo)
        if create:
            create_tables(engine)
        return cls(engine)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self._sessionmaker()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_content(
        self,
        *,
        user_id: str,
        content_type: ContentType,
        url: str,
        created_at: datetime | None = None,
    ) -> ContentOut:
        with self._session() as db:
            row = Content(
                user_id=user_id,
                type=ContentType(content_type).value,
                url=url,
                created_at=created_at or utcnow(),
            )
            db.add(row)
            db.flush()
            return ContentOut.model_validate(row)

    def get_content(self, content_id: int) -> ContentOut | None:
        if not _storable_id(content_id):
            return None
        with self._session() as db:
            row = db.get(Content, content_id)
            return ContentOut.model_validate(row) if row is not None else None

    def list_content(self) -> list[ContentOut]:
        with self._session() as db:
            rows = db.scalars(select(Content).order_by(Content.id))
            return [ContentOut.model_validate(row) for row in rows]

    def create_vote(
        self,
        *,
        content_id: int,
        user_id: str,
        emoji: Emoji,
        created_at: datetime | None = None,
    ) -> VoteOut:
        with self._session() as db:
            row = Vote(
                content_id=content_id,
                user_id=user_id,
                emoji=Emoji(emoji).value,
                created_at=created_at or utcnow(),
            )
            db.add(row)
            db.flush()
            return VoteOut.model_validate(row)

    def votes_for(self, content_id: int) -> list[VoteOut]:
        if not _storable_id(content_id):
            return []
        with self._session() as db:
            rows = db.scalars(
                select(Vote).where(Vote.content_id == content_id).order_by(Vote.id)
            )
            return [VoteOut.model_validate(row) for row in rows]

    @staticmethod
    def _select_favorite(db: Session, user_id: str, content_id: int) -> Favorite | None:
        return db.scalars(
            select(Favorite).where(
                Favorite.user_id == user_id,
                Favorite.content_id == content_id,
            )
        ).first()

    def get_favorite(self, user_id: str, content_id: int) -> FavoriteOut | None:
        if not _storable_id(content_id):
            return None
        with self._session() as db:
            row = self._select_favorite(db, user_id, content_id)
            return FavoriteOut.model_validate(row) if row is not None else None

    def create_favorite(self, *, user_id: str, content_id: int) -> FavoriteOut:
        try:
            with self._session() as db:
                row = self._select_favorite(db, user_id, content_id)
                if row is None:
                    row = Favorite(user_id=user_id, content_id=content_id, created_at=utcnow())
                    db.add(row)
                    db.flush()
                return FavoriteOut.model_validate(row)
        except IntegrityError:
            # A concurrent request saved the same pair first.
            logger.debug("Favorite (%s, %s) already exists", user_id, content_id)
            existing = self.get_favorite(user_id, content_id)
            if existing is None:
                raise
            return existing

    def delete_favorite(self, user_id: str, content_id: int) -> None:
        if not _storable_id(content_id):
            return
        with self._session() as db:
            db.execute(
                delete(Favorite).where(
                    Favorite.user_id == user_id,
                    Favorite.content_id == content_id,
                )
            )

    def favorites_for(self, user_id: str) -> list[FavoriteOut]:
        with self._session() as db:
            rows = db.scalars(
                select(Favorite).where(Favorite.user_id == user_id).order_by(Favorite.id)
            )
            return [FavoriteOut.model_validate(row) for row in rows]

    def get_chart(self, time_frame: ChartTimeFrame) -> ChartSeries | None:
        with self._session() as db:
            row = db.scalars(
                select(ChartData).where(ChartData.time_frame == ChartTimeFrame(time_frame).value)
            ).first()
            return ChartSeries.model_validate(row) if row is not None else None

    def put_chart(self, series: ChartSeries) -> ChartSeries:
        try:
            with self._session() as db:
                db.add(
                    ChartData(
                        time_frame=series.time_frame.value,
                        labels=list(series.labels),
                        core_dopamine=list(series.core_dopamine),
                        liquidation_moments=list(series.liquidation_moments),
                        chill_potent=list(series.chill_potent),
                        fun_fast_hits=list(series.fun_fast_hits),
                    )
                )
            return series
        except IntegrityError:
            stored = self.get_chart(series.time_frame)
            if stored is None:
                raise
            return stored

    def reset(self) -> None:
        with self._session() as db:
            if db.get_bind().dialect.name == "postgresql":
                db.execute(text("TRUNCATE TABLE favorite, vote, content RESTART IDENTITY CASCADE"))
            else:
                # SQLite reuses max(rowid) + 1, so emptied tables restart at 1.
                db.execute(delete(Favorite))
                db.execute(delete(Vote))
                db.execute(delete(Content))

    def close(self) -> None:
        self.engine.dispose()
