import logging as python_logging
import uuid
from typing import Any
from .interface import Logger

# One session id per process so every component's lines can be correlated
_PROCESS_SESSION_ID = str(uuid.uuid4())[:8]


class ConsoleLogger(Logger):
    """
    Logger implementation using Python's built-in logging module.
    Logs to console with session tracking and key=value extras.
    """

    def __init__(
        self,
        name: str = "radarchart",
        level: int = python_logging.INFO,
        format_string: str = "%(asctime)s [%(levelname)s] [session:%(session_id)s] %(message)s",
    ):
        """
        Initialize the console logger

        Args:
            name: Logger name (prefixed with "radarchart.")
            level: Logging level (logging.DEBUG, logging.INFO, etc.)
            format_string: Log format string (must include %(session_id)s)
        """
        self._session_id = _PROCESS_SESSION_ID
        if name != "radarchart" and not name.startswith("radarchart."):
            name = f"radarchart.{name}"
        self._logger = python_logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.propagate = False

        # Only add handler if none exist (avoid duplicate handlers)
        if not self._logger.handlers:
            handler = python_logging.StreamHandler()
            handler.setLevel(python_logging.DEBUG)
            handler.setFormatter(python_logging.Formatter(format_string))
            self._logger.addHandler(handler)

    @property
    def name(self) -> str:
        return self._logger.name

    def get_session_id(self) -> str:
        """Get the current session ID"""
        return self._session_id

    def set_level(self, level: int) -> None:
        self._logger.setLevel(level)

    def _format_extra(self, **kwargs: Any) -> str:
        """Format additional keyword arguments"""
        if not kwargs:
            return ""
        return " " + " ".join(f"{k}={v}" for k, v in kwargs.items())

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(
            level, message + self._format_extra(**kwargs), extra={"session_id": self._session_id}
        )

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message"""
        self._log(python_logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message"""
        self._log(python_logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message"""
        self._log(python_logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message"""
        self._log(python_logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        """Log a critical message"""
        self._log(python_logging.CRITICAL, message, **kwargs)
