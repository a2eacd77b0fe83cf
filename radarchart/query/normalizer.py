"""Series normalization

The legacy radar layout draws at most two layers, and the second layer's
first point always repeats its last point.
"""

from typing import List, Sequence

from radarchart.chart_params import ChartRequest
from radarchart.exceptions import ValidationError

MAX_SERIES = 2
MSG_NO_DATA = "No data points provided"


def normalize_series(series: Sequence[Sequence[float]]) -> List[List[float]]:
    """
    Cap the series count and mirror the second series' endpoint

    Returns new lists; the input is left untouched.
    """
    normalized = [list(s) for s in series[:MAX_SERIES]]
    if len(normalized) == MAX_SERIES and normalized[1]:
        normalized[1][0] = normalized[1][-1]
    return normalized


def compute_note(series: Sequence[Sequence[float]]) -> int:
    """
    The note is the first point of the first series, truncated toward zero

    Raises:
        ValidationError: If there is no first point
    """
    if not series or not series[0]:
        raise ValidationError(MSG_NO_DATA, param="chd")
    return int(series[0][0])


def normalize_request(request: ChartRequest) -> ChartRequest:
    """Return a copy of the request with normalized series"""
    series = normalize_series(request.series)
    if not series or not series[0]:
        raise ValidationError(MSG_NO_DATA, param="chd")
    return request.model_copy(update={"series": series})
