"""Chart parameters module

Defines the data structure handed from the query parser to the renderer.
"""

from radarchart.chart_params.params import ChartRequest, RADAR_CHART_TYPE

__all__ = ["ChartRequest", "RADAR_CHART_TYPE"]
