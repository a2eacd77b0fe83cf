"""Custom exceptions for the radarchart service.

ValidationError maps to HTTP 400, RenderError and TransmissionError map
to HTTP 500. ConfigurationError is raised at startup only.
"""

from typing import Optional


class RadarChartError(Exception):
    """Base exception for all radarchart errors"""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ValidationError(RadarChartError):
    """Client supplied a malformed query parameter"""

    def __init__(self, message: str, param: Optional[str] = None, value: Optional[str] = None):
        super().__init__(message, details={"param": param, "value": value})
        self.param = param
        self.value = value


class RenderError(RadarChartError):
    """The chart renderer failed to produce an image"""


class TransmissionError(RadarChartError):
    """The rendered image could not be written to the response"""


class ConfigurationError(RadarChartError):
    """Settings are missing or invalid"""


__all__ = [
    "RadarChartError",
    "ValidationError",
    "RenderError",
    "TransmissionError",
    "ConfigurationError",
]
