from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from radarchart.chart_params import ChartRequest
    from radarchart.themes import Theme


class ChartHandler(ABC):
    """Base class for chart type handlers"""

    @abstractmethod
    def plot(self, ax: "Axes", data: "ChartRequest", theme: "Theme", axis_max: float) -> None:
        """Plot the chart on the given axes"""
        pass
