from typing import TYPE_CHECKING, Dict, Any

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

from .base import Theme


class LightTheme(Theme):
    """Light theme with clean, bright colors on a white background"""

    def __init__(self):
        self.background_color = "#FFFFFF"
        self.text_color = "#000000"
        self.grid_color = "#E0E0E0"
        self.default_color = "#1f77b4"
        self.colors = [
            "#1f77b4",  # blue
            "#ff7f0e",  # orange
        ]
        self.stroke_width = 1.0
        self.fill_alpha = 0.25
        self.font_family = "sans-serif"
        self.font_size = 10
        self.note_font_size = 28.0
        self.note_color = "#333333"

    def apply(self, fig: "Figure", ax: "Axes") -> None:
        """Apply light theme styling"""
        fig.patch.set_facecolor(self.background_color)
        ax.set_facecolor(self.background_color)

        ax.tick_params(colors=self.text_color, labelsize=self.font_size)
        for spine in ax.spines.values():
            spine.set_edgecolor(self.grid_color)
        ax.grid(True, alpha=0.6, color=self.grid_color)

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
            "name": "light",
            "background_color": self.background_color,
            "text_color": self.text_color,
            "grid_color": self.grid_color,
            "default_color": self.default_color,
            "colors": self.colors,
            "font_family": self.font_family,
            "font_size": self.font_size,
        }
