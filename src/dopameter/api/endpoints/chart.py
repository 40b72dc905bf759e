"""Live activity chart endpoint."""

from fastapi import APIRouter

from dopameter.schemas import ChartSeries

from ..dependencies import ChartServiceDep

router = APIRouter(prefix="/chart", tags=["chart"])


@router.get("/{time_frame}", response_model=ChartSeries)
async def get_chart(time_frame: str, charts: ChartServiceDep) -> ChartSeries:
    """Return the synthetic activity series for 24H, 7D or 30D."""
    return charts.get(time_frame)
