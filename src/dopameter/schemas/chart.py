"""Activity chart schemas."""

from pydantic import model_validator

from .common import CamelModel, ChartTimeFrame


class ChartSeries(CamelModel):
    """Four synthetic series sharing one label axis."""

    time_frame: ChartTimeFrame
    labels: list[str]
    core_dopamine: list[int]
    liquidation_moments: list[int]
    chill_potent: list[int]
    fun_fast_hits: list[int]

    @model_validator(mode="after")
    def _check_lengths(self) -> "ChartSeries":
        expected = len(self.labels)
        for name in ("core_dopamine", "liquidation_moments", "chill_potent", "fun_fast_hits"):
            if len(getattr(self, name)) != expected:
                raise ValueError(f"{name} must have {expected} points")
        return self
