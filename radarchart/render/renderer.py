"""Radar chart renderer

Draws normalized series on matplotlib polar axes and overlays the note.
Uses Figure and the Agg canvas directly instead of pyplot, so concurrent
requests never share global figure state.
"""

import io
import logging
from typing import Dict, Optional, Tuple

from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from matplotlib.text import Text
from matplotlib.transforms import IdentityTransform

from radarchart.chart_params import ChartRequest
from radarchart.exceptions import RenderError
from radarchart.handlers import ChartHandler, RadarChartHandler
from radarchart.logger import ConsoleLogger, Logger
from radarchart.render.base import ChartRendererBase
from radarchart.settings import DEFAULT_AXIS_MAX
from radarchart.themes import Theme, get_theme

DPI = 100
IMAGE_FORMAT = "png"
HORIZONTAL_PADDING_PX = 10

# The note is centered against the legacy 225x225 canvas, not the requested size
NOTE_CANVAS_PX = 225
NOTE_OFFSET_Y_PX = 22


def note_position(text_width: float, text_height: float) -> Tuple[float, float]:
    """
    Top-left based position of the note's baseline

    Returns:
        (x, y) in pixels, y measured down from the top of the canvas
    """
    x = (NOTE_CANVAS_PX - text_width) / 2
    y = (NOTE_CANVAS_PX - text_height) / 2 + NOTE_OFFSET_Y_PX
    return x, y


class ChartRenderer(ChartRendererBase):
    """Main renderer that delegates plotting to the chart type handler"""

    def __init__(
        self,
        theme: Optional[Theme] = None,
        axis_max: float = DEFAULT_AXIS_MAX,
        logger: Optional[Logger] = None,
    ):
        self.theme = theme or get_theme("legacy")
        self.axis_max = axis_max
        self.handlers: Dict[str, ChartHandler] = {
            "r": RadarChartHandler(),
        }
        self.logger = logger or ConsoleLogger(name="renderer", level=logging.INFO)
        self.logger.debug(
            "ChartRenderer initialized",
            handlers=list(self.handlers.keys()),
            theme=self.theme.get_config().get("name"),
        )

    def render(self, data: ChartRequest, note: int) -> bytes:
        self.logger.debug(
            "Starting render",
            chart_type=data.chart_type,
            width=data.width,
            height=data.height,
            series=data.series_count,
            data_points=data.data_points,
        )

        buf = None
        try:
            handler = self.handlers.get(data.chart_type)
            if handler is None:
                self.logger.error("Unsupported chart type", chart_type=data.chart_type)
                raise RenderError(f"Unsupported chart type: {data.chart_type}")

            try:
                fig = Figure(figsize=(data.width / DPI, data.height / DPI), dpi=DPI)
                canvas = FigureCanvasAgg(fig)
                ax = fig.add_subplot(projection="polar")
                margin = min(HORIZONTAL_PADDING_PX / data.width, 0.25)
                fig.subplots_adjust(left=margin, right=1 - margin, top=1, bottom=0)
            except Exception as e:
                self.logger.error("Failed to create figure", error=str(e))
                raise RenderError(f"Failed to create matplotlib figure: {str(e)}")

            try:
                self.theme.apply(fig, ax)
            except Exception as e:
                self.logger.error("Failed to apply theme", error=str(e))
                raise RenderError(f"Failed to apply theme: {str(e)}")

            try:
                handler.plot(ax, data, self.theme, self.axis_max)
            except Exception as e:
                self.logger.error(
                    "Failed to plot data", error=str(e), handler=type(handler).__name__
                )
                raise RenderError(f"Failed to plot data: {str(e)}")

            try:
                self._draw_note(fig, canvas, note, data.height)
            except Exception as e:
                self.logger.error("Failed to draw note", error=str(e), note=note)
                raise RenderError(f"Failed to draw note: {str(e)}")

            try:
                buf = io.BytesIO()
                fig.savefig(buf, format=IMAGE_FORMAT, dpi=DPI, facecolor=fig.get_facecolor())
                image_data = buf.getvalue()
            except Exception as e:
                self.logger.error("Failed to save to buffer", error=str(e))
                raise RenderError(f"Failed to save image to buffer: {str(e)}")

            self.logger.debug(
                "Render completed", output_size_bytes=len(image_data), note=note
            )
            return image_data

        except RenderError:
            raise
        except MemoryError:
            self.logger.critical(
                "Out of memory during render", width=data.width, height=data.height
            )
            raise RenderError("Not enough memory to render this chart")
        except Exception as e:
            self.logger.error(
                "Unexpected error during rendering", error=str(e), error_type=type(e).__name__
            )
            raise RenderError(f"Unexpected error during rendering: {str(e)}")
        finally:
            if buf is not None:
                buf.close()

    def _draw_note(self, fig: Figure, canvas: FigureCanvasAgg, note: int, height_px: int) -> Text:
        """Measure the note text, then place it at the legacy centered position"""
        style = self.theme.get_note_style()
        text = fig.text(
            0,
            0,
            str(note),
            transform=IdentityTransform(),
            ha="left",
            va="baseline",
            fontsize=style["fontsize"],
            color=style["color"],
        )
        extent = text.get_window_extent(renderer=canvas.get_renderer())
        x, y_from_top = note_position(extent.width, extent.height)
        # Display coordinates grow upwards
        text.set_position((x, height_px - y_from_top))
        return text
