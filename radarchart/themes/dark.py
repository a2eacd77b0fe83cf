from typing import TYPE_CHECKING, Dict, Any

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

from .base import Theme


class DarkTheme(Theme):
    """Dark theme with muted colors for dark dashboards"""

    def __init__(self):
        self.background_color = "#1E1E1E"
        self.text_color = "#E0E0E0"
        self.grid_color = "#3A3A3A"
        self.default_color = "#5DADE2"
        self.colors = [
            "#5DADE2",  # light blue
            "#F39C12",  # orange
        ]
        self.stroke_width = 1.0
        self.fill_alpha = 0.3
        self.font_family = "sans-serif"
        self.font_size = 10
        self.note_font_size = 28.0
        self.note_color = "#E0E0E0"

    def apply(self, fig: "Figure", ax: "Axes") -> None:
        """Apply dark theme styling"""
        fig.patch.set_facecolor(self.background_color)
        ax.set_facecolor(self.background_color)

        ax.tick_params(colors=self.text_color, labelsize=self.font_size)
        for spine in ax.spines.values():
            spine.set_edgecolor(self.grid_color)
        ax.grid(True, alpha=0.5, color=self.grid_color)

    def get_default_color(self) -> str:
        return self.default_color

    def get_colors(self) -> list[str]:
        return self.colors

    def get_series_style(self) -> Dict[str, Any]:
        return {
            "stroke_color": None,
            "stroke_width": self.stroke_width,
            "fill_alpha": self.fill_alpha,
        }

    def get_note_style(self) -> Dict[str, Any]:
        return {"fontsize": self.note_font_size, "color": self.note_color}

    def get_config(self) -> Dict[str, Any]:
        """Get theme configuration"""
        return {
            "name": "dark",
            "background_color": self.background_color,
            "text_color": self.text_color,
            "grid_color": self.grid_color,
            "default_color": self.default_color,
            "colors": self.colors,
            "font_family": self.font_family,
            "font_size": self.font_size,
        }
