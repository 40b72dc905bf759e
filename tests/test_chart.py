"""Tests for the synthetic activity chart."""

import random
from datetime import date

import pytest

from dopameter.core.errors import ValidationError
from dopameter.schemas import ChartTimeFrame
from dopameter.services import ChartService
from dopameter.services.chart import SERIES_PROFILES, chart_labels
from dopameter.storage import MemoryStorage, Storage

# 2026-10-19 is a Monday.
MONDAY = date(2026, 10, 19)


def _service(storage: Storage, seed: int = 42) -> ChartService:
    return ChartService(storage, rng=random.Random(seed), today=lambda: MONDAY)


def test_hour_labels() -> None:
    labels = chart_labels(ChartTimeFrame.HOURS_24, MONDAY)

    assert len(labels) == 24
    assert labels[0] == "0:00"
    assert labels[-1] == "23:00"


def test_weekday_labels_end_today() -> None:
    assert chart_labels(ChartTimeFrame.DAYS_7, MONDAY) == [
        "Tue", "Wed", "Thu", "Fri", "Sat", "Sun", "Mon",
    ]


def test_weekday_labels_on_sunday() -> None:
    assert chart_labels(ChartTimeFrame.DAYS_7, date(2026, 10, 18))[-1] == "Sun"


def test_day_number_labels() -> None:
    assert chart_labels(ChartTimeFrame.DAYS_30, MONDAY) == [str(day) for day in range(1, 31)]


@pytest.mark.parametrize("time_frame", list(ChartTimeFrame))
def test_series_lengths_and_bounds(time_frame: ChartTimeFrame) -> None:
    series = _service(MemoryStorage()).generate(time_frame)

    for name, (base, variance) in SERIES_PROFILES.items():
        points = getattr(series, name)
        assert len(points) == len(series.labels)
        assert all(base - variance <= point <= 90 for point in points)


def test_get_memoizes_per_time_frame(storage: Storage) -> None:
    first = _service(storage, seed=1).get("30D")
    again = _service(storage, seed=2).get(ChartTimeFrame.DAYS_30)

    assert again == first
    assert storage.get_chart(ChartTimeFrame.DAYS_30) == first


def test_time_frames_are_generated_independently() -> None:
    service = _service(MemoryStorage())

    day = service.get("24H")
    week = service.get("7D")

    assert len(day.labels) == 24
    assert len(week.labels) == 7


def test_unknown_time_frame_rejected() -> None:
    with pytest.raises(ValidationError):
        _service(MemoryStorage()).get("1Y")
