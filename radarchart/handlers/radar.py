import math
from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from radarchart.chart_params import ChartRequest
    from radarchart.themes import Theme

from radarchart.handlers.base import ChartHandler

RING_COUNT = 5


def spoke_count(series: Sequence[Sequence[float]], axis_labels: Sequence[str]) -> int:
    """One spoke per axis label, or per point of the longest series without labels"""
    if axis_labels:
        return len(axis_labels)
    return max((len(s) for s in series), default=0)


def fit_to_spokes(values: Sequence[float], spokes: int, axis_max: float) -> List[float]:
    """Truncate or zero-pad a series to the spoke count and clip into [0, axis_max]"""
    fitted = [min(max(v, 0.0), axis_max) for v in values[:spokes]]
    fitted.extend([0.0] * (spokes - len(fitted)))
    return fitted


class RadarChartHandler(ChartHandler):
    """Handler for radar (spider) charts drawn on polar axes"""

    def plot(self, ax: "Axes", data: "ChartRequest", theme: "Theme", axis_max: float) -> None:
        """
        Plot every series as a closed, filled polygon

        Raises:
            ValueError: If data cannot be plotted
        """
        try:
            spokes = spoke_count(data.series, data.axis_labels)
            if spokes == 0:
                raise ValueError("no spokes to draw")

            angles = [2 * math.pi * i / spokes for i in range(spokes)]
            closed_angles = angles + angles[:1]

            # First spoke points up, spokes run clockwise
            ax.set_theta_offset(math.pi / 2)
            ax.set_theta_direction(-1)

            colors = theme.get_colors() or [theme.get_default_color()]
            style = theme.get_series_style()

            for index, series in enumerate(data.series):
                color = colors[index % len(colors)]
                values = fit_to_spokes(series, spokes, axis_max)
                closed_values = values + values[:1]

                ax.plot(
                    closed_angles,
                    closed_values,
                    color=style["stroke_color"] or color,
                    linewidth=style["stroke_width"],
                )
                ax.fill(closed_angles, closed_values, color=color, alpha=style["fill_alpha"])

            ax.set_ylim(0, axis_max)
            ax.set_yticks([axis_max * (i + 1) / RING_COUNT for i in range(RING_COUNT)])
            ax.set_yticklabels([])

            labels = list(data.axis_labels) if data.axis_labels else [""] * spokes
            ax.set_xticks(angles)
            ax.set_xticklabels(labels, fontfamily=theme.get_config().get("font_family"))
        except Exception as e:
            raise ValueError(f"Failed to plot radar chart: {str(e)}")
