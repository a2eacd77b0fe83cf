"""Logger interface shared by the web server, renderer and image cache

Messages carry structured context as keyword arguments, rendered by the
implementation (ConsoleLogger writes them as key=value pairs).
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract base class for radarchart component loggers"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Fully qualified logger name, e.g. "radarchart.web_server" """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def get_session_id(self) -> str:
        """Identifier shared by every line this process writes"""

    @abstractmethod
    def set_level(self, level: int) -> None:
        """Change the threshold after settings are loaded (logging.DEBUG etc.)"""
