#!/usr/bin/env python3
"""Test parsing of the legacy chart query parameters"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest
from radarchart.exceptions import ValidationError
from radarchart.query import (
    parse_axis_labels,
    parse_chart_query,
    parse_chart_type,
    parse_data,
    parse_size,
)


def valid_params(**overrides):
    params = {
        "cht": "r",
        "chs": "225x225",
        "chd": "t:10,20,30|5,-1,15",
        "chxl": "0:|note|mus|reg",
    }
    params.update(overrides)
    return {k: v for k, v in params.items() if v is not None}


# ============================================================================
# Chart type
# ============================================================================


def test_radar_chart_type_accepted():
    assert parse_chart_type("r") == "r"


@pytest.mark.parametrize("value", ["bar", "", "R", " r", None])
def test_other_chart_types_rejected(value):
    with pytest.raises(ValidationError) as exc_info:
        parse_chart_type(value)
    assert exc_info.value.message == "Unsupported chart type"
    assert exc_info.value.param == "cht"


# ============================================================================
# Size
# ============================================================================


def test_size_parses_width_and_height():
    assert parse_size("225x225") == (225, 225)
    assert parse_size("300x150") == (300, 150)


def test_size_accepts_explicit_plus_sign():
    assert parse_size("+10x20") == (10, 20)


@pytest.mark.parametrize("value", ["225", "", None, "1x2x3"])
def test_size_needs_exactly_two_tokens(value):
    with pytest.raises(ValidationError, match="Invalid chart size"):
        parse_size(value)


def test_x_alone_splits_into_two_empty_tokens():
    # "x" yields ["", ""]: the token count is right, the width is not
    with pytest.raises(ValidationError) as exc_info:
        parse_size("x")
    assert exc_info.value.message == "Invalid chart width"


@pytest.mark.parametrize(
    "value",
    ["abcx225", "2.5x225", " 225x225", "1_0x225", "0x225", "-5x225", "225\nx225", "\u0661\u0662x225"],
)
def test_invalid_width(value):
    with pytest.raises(ValidationError) as exc_info:
        parse_size(value)
    assert exc_info.value.message == "Invalid chart width"


@pytest.mark.parametrize("value", ["225xabc", "225x", "225x0", "225x-1", "225x225\n"])
def test_invalid_height(value):
    with pytest.raises(ValidationError) as exc_info:
        parse_size(value)
    assert exc_info.value.message == "Invalid chart height"


def test_width_checked_before_height():
    with pytest.raises(ValidationError) as exc_info:
        parse_size("axb")
    assert exc_info.value.message == "Invalid chart width"


# ============================================================================
# Data
# ============================================================================


def test_data_series_split_on_pipe_and_comma():
    assert parse_data("t:10,20,30|5,-1,15") == [[10.0, 20.0, 30.0], [5.0, -1.0, 15.0]]


def test_data_prefix_is_optional():
    assert parse_data("1.5,2") == [[1.5, 2.0]]


def test_placeholder_values_are_kept():
    assert parse_data("t:-1,-1,-1,72") == [[-1.0, -1.0, -1.0, 72.0]]


def test_scientific_notation_accepted():
    assert parse_data("t:1e1,2.5E-1") == [[10.0, 0.25]]


@pytest.mark.parametrize(
    "value",
    [
        "t:1,abc",
        "t:",
        "",
        None,
        "t:1,2|",
        "t:1,,2",
        "t:1, 2",
        "t:1_000",
        "t:nan",
        "t:inf,1",
        "t:\u0661\u0662",
        "t:1,\uff15",
    ],
)
def test_invalid_data_points(value):
    with pytest.raises(ValidationError) as exc_info:
        parse_data(value)
    assert exc_info.value.message == "Invalid data point"
    assert exc_info.value.param == "chd"


# ============================================================================
# Axis labels
# ============================================================================


def test_axis_labels_drop_index_marker():
    assert parse_axis_labels("0:|note|mus|reg") == ["mus", "reg"]


def test_axis_labels_split_on_first_colon_only():
    assert parse_axis_labels("0:|x|a:b|c") == ["a:b", "c"]


def test_axis_labels_without_leading_pipe():
    assert parse_axis_labels("0:note|mus") == ["mus"]


def test_axis_labels_may_be_empty():
    assert parse_axis_labels("0:") == []
    assert parse_axis_labels("0:|note") == []


@pytest.mark.parametrize("value", ["", None, "note|mus|reg"])
def test_axis_labels_need_colon(value):
    with pytest.raises(ValidationError) as exc_info:
        parse_axis_labels(value)
    assert exc_info.value.message == "Invalid axis labels"


# ============================================================================
# Full query
# ============================================================================


def test_parse_full_query():
    chart = parse_chart_query(valid_params())

    assert chart.chart_type == "r"
    assert (chart.width, chart.height) == (225, 225)
    # Parsing alone does not normalize
    assert chart.series == [[10.0, 20.0, 30.0], [5.0, -1.0, 15.0]]
    assert chart.axis_labels == ["mus", "reg"]


def test_label_count_not_checked_against_series():
    chart = parse_chart_query(valid_params(chxl="0:|x|only"))
    assert chart.axis_labels == ["only"]
    assert len(chart.series[0]) == 3


@pytest.mark.parametrize(
    "overrides,expected",
    [
        ({"cht": "bar", "chs": "bad", "chd": "bad", "chxl": "bad"}, "Unsupported chart type"),
        ({"chs": "bad", "chd": "bad", "chxl": "bad"}, "Invalid chart size"),
        ({"chd": "bad", "chxl": "bad"}, "Invalid data point"),
        ({"chxl": "bad"}, "Invalid axis labels"),
    ],
)
def test_first_failure_wins(overrides, expected):
    with pytest.raises(ValidationError) as exc_info:
        parse_chart_query(valid_params(**overrides))
    assert exc_info.value.message == expected


def test_missing_chart_type():
    with pytest.raises(ValidationError, match="Unsupported chart type"):
        parse_chart_query(valid_params(cht=None))
