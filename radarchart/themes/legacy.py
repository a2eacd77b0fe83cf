from typing import TYPE_CHECKING, Dict, Any

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

from .base import Theme


class LegacyTheme(Theme):
    """Transparent theme matching the legacy chart-image service output"""

    def __init__(self):
        self.background_color = "#FFFFFF00"
        self.text_color = "#0000006D"
        self.split_line_color = "#00000014"
        self.axis_stroke_color = "#00000032"
        self.stroke_color = "#0000006D"
        self.default_color = "#0D8800"
        self.colors = [
            "#0D8800",  # green
            "#FF6F00",  # orange
        ]
        self.stroke_width = 0.5
        self.fill_alpha = 0.38
        self.font_family = "sans-serif"
        self.font_size = 10
        self.note_font_size = 28.0
        self.note_color = "#00000064"

    def apply(self, fig: "Figure", ax: "Axes") -> None:
        """Apply legacy theme styling"""
        # Fully transparent canvas
        fig.patch.set_facecolor(self.background_color)
        ax.set_facecolor(self.background_color)

        # Spoke labels
        ax.tick_params(colors=self.text_color, labelsize=self.font_size)

        # Outer ring and split lines
        for spine in ax.spines.values():
            spine.set_edgecolor(self.axis_stroke_color)
            spine.set_linewidth(self.stroke_width)
        ax.grid(True, color=self.split_line_color, linewidth=self.stroke_width)

    def get_default_color(self) -> str:
        return self.default_color

    def get_colors(self) -> list[str]:
        return self.colors

    def get_series_style(self) -> Dict[str, Any]:
        return {
            "stroke_color": self.stroke_color,
            "stroke_width": self.stroke_width,
            "fill_alpha": self.fill_alpha,
        }

    def get_note_style(self) -> Dict[str, Any]:
        return {"fontsize": self.note_font_size, "color": self.note_color}

    def get_config(self) -> Dict[str, Any]:
        """Get theme configuration"""
        return {
            "name": "legacy",
            "background_color": self.background_color,
            "text_color": self.text_color,
            "split_line_color": self.split_line_color,
            "axis_stroke_color": self.axis_stroke_color,
            "default_color": self.default_color,
            "colors": self.colors,
            "font_family": self.font_family,
            "font_size": self.font_size,
        }
