"""Renderer interface

The web server only depends on this interface, so tests and alternate
backends can supply their own implementation.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from radarchart.chart_params import ChartRequest


class ChartRendererBase(ABC):
    """Turns a normalized chart request into PNG bytes"""

    @abstractmethod
    def render(self, data: "ChartRequest", note: int) -> bytes:
        """
        Render the chart with the note drawn over it

        Args:
            data: Normalized chart request
            note: Integer drawn as a centered text overlay

        Returns:
            PNG image bytes

        Raises:
            RenderError: If the chart could not be produced
        """
        pass
