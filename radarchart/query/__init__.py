"""
Query module for radarchart

Parses the legacy chart URL parameters and normalizes the parsed series.
"""

from .parser import (
    parse_chart_query,
    parse_chart_type,
    parse_size,
    parse_data,
    parse_axis_labels,
)
from .normalizer import normalize_series, normalize_request, compute_note

__all__ = [
    "parse_chart_query",
    "parse_chart_type",
    "parse_size",
    "parse_data",
    "parse_axis_labels",
    "normalize_series",
    "normalize_request",
    "compute_note",
]
