"""Synthetic "live activity" chart series.

The series are presentation filler and are not derived from votes. Each
time frame is generated once and memoized in storage for the life of the
backend.
"""
from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable
from datetime import date
from typing import Final

from dopameter.core.errors import ValidationError
from dopameter.schemas import ChartSeries, ChartTimeFrame
from dopameter.storage import Storage

__all__ = ["SERIES_PROFILES", "ChartService", "chart_labels"]

logger = logging.getLogger(__name__)

WEEKDAYS: Final[tuple[str, ...]] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

# (base, variance) per series
SERIES_PROFILES: Final[dict[str, tuple[int, int]]] = {
    "core_dopamine": (35, 15),
    "liquidation_moments": (40, 20),
    "chill_potent": (30, 10),
    "fun_fast_hits": (25, 15),
}

SPIKE_MIN: Final[int] = 20
SPIKE_SPREAD: Final[int] = 10
SPIKE_CEILING: Final[int] = 90


def chart_labels(time_frame: ChartTimeFrame, today: date) -> list[str]:
    """Return the x-axis labels for ``time_frame``."""
    if time_frame is ChartTimeFrame.HOURS_24:
        return [f"{hour}:00" for hour in range(24)]
    if time_frame is ChartTimeFrame.DAYS_7:
        # date.weekday() is Monday=0; shift so Sunday=0.
        current = (today.weekday() + 1) % 7
        return [WEEKDAYS[(current - 6 + offset) % 7] for offset in range(7)]
    return [str(day) for day in range(1, 31)]


class ChartService:
    """Return memoized chart series, generating them on first request."""

    def __init__(
        self,
        storage: Storage,
        rng: random.Random | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.storage = storage
        self.rng = rng or random.Random()
        self.today = today

    def get(self, time_frame: ChartTimeFrame | str) -> ChartSeries:
        """Return the series for ``time_frame``.

        Raises:
            ValidationError: If ``time_frame`` is not 24H, 7D or 30D.
        """
        try:
            frame = ChartTimeFrame(time_frame)
        except ValueError as err:
            raise ValidationError("Time frame must be one of: 24H, 7D, 30D") from err

        cached = self.storage.get_chart(frame)
        if cached is not None:
            return cached
        return self.storage.put_chart(self.generate(frame))

    def generate(self, time_frame: ChartTimeFrame) -> ChartSeries:
        """Synthesize a fresh series set without memoizing it."""
        labels = chart_labels(time_frame, self.today())
        points = {
            name: self._spiked(self._noise(len(labels), base, variance))
            for name, (base, variance) in SERIES_PROFILES.items()
        }
        logger.debug("Generated %s chart with %d points", time_frame.value, len(labels))
        return ChartSeries(time_frame=time_frame, labels=labels, **points)

    def _noise(self, count: int, base: int, variance: int) -> list[int]:
        return [math.floor(base + self.rng.uniform(-variance, variance)) for _ in range(count)]

    def _spiked(self, data: list[int]) -> list[int]:
        for _ in range(len(data) // 5):
            index = self.rng.randrange(len(data))
            data[index] = min(SPIKE_CEILING, data[index] + SPIKE_MIN + self.rng.randrange(SPIKE_SPREAD))
        return data
