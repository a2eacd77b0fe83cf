"""Legacy chart query parser

Decodes the compact chart-image URL parameters:

    cht   chart type, only "r" (radar) is accepted
    chs   size as <width>x<height>
    chd   data as t:<v,v,...>|<v,v,...>
    chxl  axis labels as 0:|<marker>|<label>|<label>...

Each check raises ValidationError on the first problem found, in the
order chart type, size, data, axis labels.
"""

import math
import re
from typing import List, Mapping, Optional, Tuple

from radarchart.chart_params import ChartRequest, RADAR_CHART_TYPE
from radarchart.exceptions import ValidationError

DATA_PREFIX = "t:"
SIZE_SEPARATOR = "x"
SERIES_SEPARATOR = "|"
POINT_SEPARATOR = ","
LABEL_INDEX_SEPARATOR = ":"
LABEL_SEPARATOR = "|"

MSG_UNSUPPORTED_TYPE = "Unsupported chart type"
MSG_INVALID_SIZE = "Invalid chart size"
MSG_INVALID_WIDTH = "Invalid chart width"
MSG_INVALID_HEIGHT = "Invalid chart height"
MSG_INVALID_POINT = "Invalid data point"
MSG_INVALID_LABELS = "Invalid axis labels"

# Optional sign then ASCII digits; int() alone would also accept " 12" and "1_2"
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_chart_type(value: Optional[str]) -> str:
    if value != RADAR_CHART_TYPE:
        raise ValidationError(MSG_UNSUPPORTED_TYPE, param="cht", value=value)
    return value


def _parse_dimension(token: str, message: str) -> int:
    if not _INT_PATTERN.fullmatch(token):
        raise ValidationError(message, param="chs", value=token)
    value = int(token)
    if value <= 0:
        raise ValidationError(message, param="chs", value=token)
    return value


def parse_size(value: Optional[str]) -> Tuple[int, int]:
    """
    Parse a <width>x<height> size value

    Width is validated before height so a request with both wrong reports
    the width.
    """
    tokens = (value or "").split(SIZE_SEPARATOR)
    if len(tokens) != 2:
        raise ValidationError(MSG_INVALID_SIZE, param="chs", value=value)
    width = _parse_dimension(tokens[0], MSG_INVALID_WIDTH)
    height = _parse_dimension(tokens[1], MSG_INVALID_HEIGHT)
    return width, height


def _parse_point(token: str) -> float:
    if not token.isascii() or token != token.strip() or "_" in token:
        raise ValidationError(MSG_INVALID_POINT, param="chd", value=token)
    try:
        value = float(token)
    except ValueError:
        raise ValidationError(MSG_INVALID_POINT, param="chd", value=token)
    if not math.isfinite(value):
        raise ValidationError(MSG_INVALID_POINT, param="chd", value=token)
    return value


def parse_data(value: Optional[str]) -> List[List[float]]:
    """
    Parse text-encoded series data

    The "t:" prefix is optional. Placeholder values such as -1 are kept as
    ordinary numbers. An empty token is not a number, so "t:" alone or a
    trailing "|" is rejected.
    """
    raw = value or ""
    if raw.startswith(DATA_PREFIX):
        raw = raw[len(DATA_PREFIX):]

    series: List[List[float]] = []
    for raw_series in raw.split(SERIES_SEPARATOR):
        points = [_parse_point(token) for token in raw_series.split(POINT_SEPARATOR)]
        if points:
            series.append(points)
    return series


def parse_axis_labels(value: Optional[str]) -> List[str]:
    """
    Parse a 0:|marker|label|... axis label string

    Only the first ':' separates the axis index. The '|' right after it
    opens the list; the first label in the list is a placeholder for the
    center note and is dropped, so "0:|note|mus|reg" gives ["mus", "reg"].
    """
    raw = value or ""
    if LABEL_INDEX_SEPARATOR not in raw:
        raise ValidationError(MSG_INVALID_LABELS, param="chxl", value=value)
    _, labels_part = raw.split(LABEL_INDEX_SEPARATOR, 1)
    if labels_part.startswith(LABEL_SEPARATOR):
        labels_part = labels_part[len(LABEL_SEPARATOR):]
    return labels_part.split(LABEL_SEPARATOR)[1:]


def parse_chart_query(params: Mapping[str, str]) -> ChartRequest:
    """
    Build a ChartRequest from query parameters

    Args:
        params: Parameter name to (first) value

    Returns:
        ChartRequest with series exactly as parsed (not yet normalized)

    Raises:
        ValidationError: On the first invalid parameter
    """
    chart_type = parse_chart_type(params.get("cht"))
    width, height = parse_size(params.get("chs"))
    series = parse_data(params.get("chd"))
    axis_labels = parse_axis_labels(params.get("chxl"))

    return ChartRequest(
        chart_type=chart_type,
        width=width,
        height=height,
        series=series,
        axis_labels=axis_labels,
    )
