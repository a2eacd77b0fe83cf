"""
Logger module for radarchart

Provides a small logging interface so components can be handed any
implementation. ConsoleLogger is the one used by the service.

Usage:
    from radarchart.logger import ConsoleLogger

    logger = ConsoleLogger(name="web_server")
    logger.info("Chart rendered", width=225, height=225)
"""

from .interface import Logger
from .console_logger import ConsoleLogger

__all__ = [
    "Logger",
    "ConsoleLogger",
]
