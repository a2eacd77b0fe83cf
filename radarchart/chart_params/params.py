"""Chart request parameters

Typed form of one /chart query after parsing.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List

RADAR_CHART_TYPE = "r"


class ChartRequest(BaseModel):
    """A parsed radar chart query (immutable once built)"""

    model_config = ConfigDict(frozen=True)

    chart_type: str = RADAR_CHART_TYPE
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    series: List[List[float]]
    axis_labels: List[str] = []

    @property
    def series_count(self) -> int:
        return len(self.series)

    @property
    def data_points(self) -> int:
        """Total number of data points across all series"""
        return sum(len(s) for s in self.series)
