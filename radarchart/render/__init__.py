"""Renderer module

Renders normalized chart requests to PNG bytes.
"""

from radarchart.render.base import ChartRendererBase
from radarchart.render.renderer import ChartRenderer, note_position

__all__ = ["ChartRendererBase", "ChartRenderer", "note_position"]
