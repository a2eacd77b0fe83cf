import logging

import pytest

from radarchart.logger import ConsoleLogger, Logger


def test_console_logger_implements_interface():
    logger = ConsoleLogger(name="interface_check")
    assert isinstance(logger, Logger)
    assert logger.name == "radarchart.interface_check"


def test_names_are_prefixed_once():
    assert ConsoleLogger(name="radarchart.renderer").name == "radarchart.renderer"
    assert ConsoleLogger().name == "radarchart"


def test_set_level_changes_threshold():
    logger = ConsoleLogger(name="level_check", level=logging.INFO)
    underlying = logging.getLogger("radarchart.level_check")
    assert not underlying.isEnabledFor(logging.DEBUG)

    logger.set_level(logging.DEBUG)
    assert underlying.isEnabledFor(logging.DEBUG)


def test_session_id_is_shared_across_components():
    assert ConsoleLogger(name="a").get_session_id() == ConsoleLogger(name="b").get_session_id()


def test_incomplete_logger_cannot_be_instantiated():
    class NoLevelLogger(Logger):
        name = "partial"

        def debug(self, message, **kwargs):
            pass

        def info(self, message, **kwargs):
            pass

        def warning(self, message, **kwargs):
            pass

        def error(self, message, **kwargs):
            pass

        def critical(self, message, **kwargs):
            pass

        def get_session_id(self):
            return "x"

    with pytest.raises(TypeError):
        NoLevelLogger()
