from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, Any

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure


class Theme(ABC):
    """Abstract base class for radar chart themes"""

    @abstractmethod
    def apply(self, fig: "Figure", ax: "Axes") -> None:
        """
        Apply the theme to a figure and polar axes

        Args:
            fig: Matplotlib figure
            ax: Matplotlib polar axes
        """
        pass

    @abstractmethod
    def get_default_color(self) -> str:
        """Get the default color for plots"""
        pass

    @abstractmethod
    def get_colors(self) -> list[str]:
        """Get a list of theme colors, one per series"""
        pass

    @abstractmethod
    def get_series_style(self) -> Dict[str, Any]:
        """Get stroke and fill settings shared by every series"""
        pass

    @abstractmethod
    def get_note_style(self) -> Dict[str, Any]:
        """Get font size and color for the note overlay"""
        pass

    @abstractmethod
    def get_config(self) -> Dict[str, Any]:
        """Get theme configuration as a dictionary"""
        pass
