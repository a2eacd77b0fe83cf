from radarchart.handlers.base import ChartHandler
from radarchart.handlers.radar import RadarChartHandler

__all__ = [
    "ChartHandler",
    "RadarChartHandler",
]
