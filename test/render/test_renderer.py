#!/usr/bin/env python3
"""Test radar chart rendering with matplotlib"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import struct

import pytest
from radarchart.chart_params import ChartRequest
from radarchart.exceptions import RenderError
from radarchart.handlers import ChartHandler
from radarchart.handlers.radar import fit_to_spokes, spoke_count
from radarchart.render import ChartRenderer, note_position
from radarchart.themes import get_theme

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def png_size(data: bytes) -> tuple[int, int]:
    """Width and height from the IHDR chunk"""
    return struct.unpack(">II", data[16:24])


def legacy_request(width: int = 225, height: int = 225) -> ChartRequest:
    return ChartRequest(
        width=width,
        height=height,
        series=[[69.12, 77, 58, 61.5, 72], [69.12, -1, -1, -1, 72, 73, 85, 50, 69.12]],
        axis_labels=["mus", "reg", "ent", "pab", "jock", "dist", "sais"],
    )


class BrokenHandler(ChartHandler):
    def plot(self, ax, data, theme, axis_max):
        raise ValueError("cannot plot")


def test_render_produces_png_of_requested_size(logger):
    logger.info("Testing legacy radar render")
    renderer = ChartRenderer()

    image = renderer.render(legacy_request(), note=69)

    assert image.startswith(PNG_SIGNATURE)
    assert png_size(image) == (225, 225)
    logger.info("✓ Legacy radar rendered", size_bytes=len(image))


def test_render_non_square_canvas():
    image = ChartRenderer().render(legacy_request(400, 300), note=0)
    assert png_size(image) == (400, 300)


def test_render_is_deterministic():
    renderer = ChartRenderer()
    assert renderer.render(legacy_request(), note=69) == renderer.render(legacy_request(), note=69)


def test_note_changes_image():
    renderer = ChartRenderer()
    assert renderer.render(legacy_request(), note=1) != renderer.render(legacy_request(), note=99)


def test_render_without_axis_labels():
    request = ChartRequest(width=200, height=200, series=[[10, 20, 30, 40]], axis_labels=[])
    image = ChartRenderer().render(request, note=10)
    assert image.startswith(PNG_SIGNATURE)


@pytest.mark.parametrize("theme_name", ["legacy", "light", "dark"])
def test_render_with_each_theme(theme_name):
    renderer = ChartRenderer(theme=get_theme(theme_name))
    image = renderer.render(legacy_request(), note=69)
    assert image.startswith(PNG_SIGNATURE)


def test_plot_failure_raises_render_error():
    renderer = ChartRenderer()
    renderer.handlers["r"] = BrokenHandler()

    with pytest.raises(RenderError, match="Failed to plot data"):
        renderer.render(legacy_request(), note=69)


def test_unknown_chart_type_raises_render_error():
    request = ChartRequest(chart_type="bar", width=100, height=100, series=[[1.0]])
    with pytest.raises(RenderError, match="Unsupported chart type"):
        ChartRenderer().render(request, note=1)


def test_note_position_centers_on_legacy_canvas():
    assert note_position(25, 25) == (100.0, 122.0)
    assert note_position(0, 0) == (112.5, 134.5)


def test_spoke_count_follows_labels_then_longest_series():
    assert spoke_count([[1, 2, 3]], ["a", "b"]) == 2
    assert spoke_count([[1, 2, 3], [1, 2, 3, 4, 5]], []) == 5


def test_fit_to_spokes_truncates_pads_and_clips():
    assert fit_to_spokes([10, 20, 30], 2, 100) == [10, 20]
    assert fit_to_spokes([10], 3, 100) == [10, 0.0, 0.0]
    assert fit_to_spokes([-1, 150, 50], 3, 100) == [0.0, 100, 50]
